# src/app/viewer.py
#!/usr/bin/env python3
"""
Grid Search Viewer: paint a grid, pick an algorithm, watch it search.

- Mouse (grid):
    left   -> place Start, then End, then walls; on Start/End removes it
    right  -> erase wall / Start / End
- Keyboard:
    [1]..[5]     -> run BFS / DFS / A* / Dijkstra / Greedy
    [M]          -> random maze
    [C]          -> clear search overlay
    [R]          -> reset grid
    [+]/[-]      -> replay speed
    [Q]/[ESC]    -> quit

Settings:
- ENV: GRID_SEARCH_SIZE, GRID_SEARCH_DELAY_MS, GRID_SEARCH_WALL_PROB, LOG_LEVEL
- CLI: --size=N --delay=MS --wall-prob=P --log-level=LEVEL

A search runs to completion into a RecordingSink; the viewer then replays
those events at the chosen speed, so the grid fills in step by step.
"""

# --- bootstrap import path so `from src...` works when run as a script ---
import sys, logging, time
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------

from typing import List, Tuple, Optional
import pygame

from src import config
from src.config import Settings, resolve_settings
from src.core.context import SearchContext, LEFT, RIGHT
from src.core.errors import GridSearchError
from src.core.search import Algorithm
from src.core.sink import RecordingSink, VISIT
from src.core.types import CellType, Coord

logger = logging.getLogger(__name__)

FONT_NAME = None  # default pygame font

# Colors
BACKGROUND  = ( 40, 40, 40)
EMPTY_C     = (255,255,255)
WALL_C      = ( 30, 30, 30)
START_C     = (  0,200,  0)
END_C       = (200,  0,  0)
PATH_C      = (255,255,100)
VISITED_C   = (100,200,255)
GRID_LINE   = ( 50, 50, 50)
PANEL_BG    = ( 50, 50, 50)
TEXT_LIGHT  = (255,255,255)
ACCENT_GOLD = (255,210,  0)
FOUND_C     = ( 80,220,120)
FAIL_C      = (220, 80, 80)

ALGO_KEYS = {
    pygame.K_1: Algorithm.BFS,
    pygame.K_2: Algorithm.DFS,
    pygame.K_3: Algorithm.ASTAR,
    pygame.K_4: Algorithm.DIJKSTRA,
    pygame.K_5: Algorithm.GREEDY,
}

# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        if self.active and self.togglable:
            bg = (58, 86, 160)
        elif self.hover:
            bg = (100, 100, 100)
        else:
            bg = (70, 70, 70)
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255), self.rect, width=2, border_radius=8)

        text = font.render(self.label, True, TEXT_LIGHT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

# ---------- Viewer ----------
class Viewer:
    def __init__(self, ctx: SearchContext, settings: Settings):
        pygame.init()

        self.ctx = ctx
        self.settings = settings
        self.font_small = pygame.font.Font(FONT_NAME, 18)
        self.font = pygame.font.Font(FONT_NAME, 22)
        self.font_big = pygame.font.Font(FONT_NAME, 28)

        self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Visualizer")

        self.clock = pygame.time.Clock()
        self.steps_per_sec = settings.steps_per_sec
        self.selected_algo: Optional[Algorithm] = None

        self._buttons: list[UIButton] = []
        self._algo_buttons: dict[Algorithm, UIButton] = {}
        self._layout(*self.screen.get_size())

        # replay state
        self._events: List[Tuple[str, Coord]] = []
        self._shown = 0
        self._replay_t0 = 0.0
        self._replay_base = 0
        self.shown_visited: set[Coord] = set()
        self.shown_path: set[Coord] = set()

    @property
    def animating(self) -> bool:
        return self._shown < len(self._events)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Largest integer cell size that fits left of the panel."""
        n = self.ctx.grid.size
        avail_w = max(1, win_w - config.PANEL_W - 2 * config.GRID_MARGIN)
        avail_h = max(1, win_h - 2 * config.GRID_MARGIN)
        self.cell_size = max(4, min(avail_w // n, avail_h // n))
        self._grid_origin = (config.GRID_MARGIN, max(config.GRID_MARGIN, (win_h - n * self.cell_size) // 2))
        self._panel = pygame.Rect(win_w - config.PANEL_W, 0, config.PANEL_W, win_h)
        self._build_buttons()

    def _cell_at_pixel(self, pos: Tuple[int, int]) -> Optional[Coord]:
        ox, oy = self._grid_origin
        px, py = pos
        if px < ox or py < oy:
            return None
        x, y = (px - ox) // self.cell_size, (py - oy) // self.cell_size
        return (x, y) if self.ctx.grid.in_bounds(x, y) else None

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            if self.animating:
                self._tick_replay()
            self._draw()
            self.clock.tick(config.FPS)

    def _tick_replay(self):
        due = self._replay_base + int((time.time() - self._replay_t0) * self.steps_per_sec)
        target = min(len(self._events), due)
        for kind, cell in self._events[self._shown:target]:
            if kind == VISIT:
                self.shown_visited.add(cell)
            else:
                self.shown_path.add(cell)
        self._shown = target

    def _restart_clock(self):
        self._replay_t0 = time.time()
        self._replay_base = self._shown

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key in ALGO_KEYS:
                    self._run_algo(ALGO_KEYS[e.key])
                elif e.key == pygame.K_m:
                    self._generate_maze()
                elif e.key == pygame.K_c:
                    self._clear_search()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._bump_speed(-1)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                handled = False
                for b in self._buttons:
                    handled = b.handle_mouse(e) or handled
                if not handled and e.type == pygame.MOUSEBUTTONDOWN:
                    self._paint(e.pos, e.button)

    # ---------- actions ----------
    def _paint(self, pos: Tuple[int, int], button: int):
        if self.animating or button not in (LEFT, RIGHT):
            return
        cell = self._cell_at_pixel(pos)
        if cell is None:
            return
        self.ctx.paint(*cell, button)

    def _run_algo(self, algo: Algorithm):
        if self.animating:
            return
        self.selected_algo = algo
        self._refresh_active_states()
        self._reset_overlays()

        sink = RecordingSink()
        try:
            self.ctx.run(algo, sink)
        except GridSearchError as ex:
            logger.warning("cannot run %s: %s", algo.label, ex)
            self.ctx.status = str(ex)
            return
        self._events = sink.events
        self._shown = 0
        self._restart_clock()

    def _generate_maze(self):
        if self.animating:
            return
        self._reset_overlays()
        self.ctx.generate_maze(self.settings.wall_probability)

    def _clear_search(self):
        if self.animating:
            return
        self._reset_overlays()
        self.ctx.clear_search()

    def _reset(self):
        if self.animating:
            return
        self._reset_overlays()
        self.ctx.reset()
        self.selected_algo = None
        self._refresh_active_states()

    def _reset_overlays(self):
        self._events = []
        self._shown = 0
        self.shown_visited.clear()
        self.shown_path.clear()

    def _bump_speed(self, direction: int):
        # roughly doubles / halves per press
        if direction > 0:
            sps = self.steps_per_sec * 2
        else:
            sps = self.steps_per_sec // 2
        self.steps_per_sec = int(max(config.MIN_STEPS_PER_SEC, min(config.MAX_STEPS_PER_SEC, sps)))
        self._restart_clock()

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill(BACKGROUND)
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _cell_color(self, x: int, y: int) -> Tuple[int, int, int]:
        kind = self.ctx.grid.cells[y][x].type
        if kind == CellType.WALL:
            return WALL_C
        if kind == CellType.START:
            return START_C
        if kind == CellType.END:
            return END_C
        # transient tags only show once the replay has reached them
        if (x, y) in self.shown_path:
            return PATH_C
        if (x, y) in self.shown_visited:
            return VISITED_C
        return EMPTY_C

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        n = self.ctx.grid.size

        for y in range(n):
            for x in range(n):
                rect = pygame.Rect(ox + x*cs, oy + y*cs, cs - 1, cs - 1)
                pygame.draw.rect(self.screen, self._cell_color(x, y), rect)

        for i in range(n + 1):
            pygame.draw.line(self.screen, GRID_LINE, (ox + i*cs - 1, oy), (ox + i*cs - 1, oy + n*cs))
            pygame.draw.line(self.screen, GRID_LINE, (ox, oy + i*cs - 1), (ox + n*cs, oy + i*cs - 1))

    # ---------- buttons + panel ----------
    def _build_buttons(self):
        self._buttons.clear()
        self._algo_buttons.clear()
        p = self._panel
        x = p.x + 20
        y = p.y + 60
        w = p.width - 40
        h = 36
        gap = 8

        for algo in Algorithm:
            btn = UIButton(algo.label, pygame.Rect(x, y, w, h), lambda a=algo: self._run_algo(a), togglable=True)
            self._buttons.append(btn)
            self._algo_buttons[algo] = btn
            y += h + gap

        y += 12
        self._buttons.append(UIButton("Generate Random Maze", pygame.Rect(x, y, w, h), self._generate_maze))
        y += h + gap
        self._buttons.append(UIButton("Clear Search", pygame.Rect(x, y, w, h), self._clear_search))
        y += h + gap

        half = (w - gap) // 2
        self._buttons.append(UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + gap, y, half, h), lambda: self._bump_speed(+1)))
        self._results_y = y + h + 24

        self._buttons.append(UIButton("Reset Grid", pygame.Rect(x, p.bottom - h - 20, w, h), self._reset))

        self._refresh_active_states()

    def _refresh_active_states(self):
        for algo, btn in self._algo_buttons.items():
            btn.set_active(algo == self.selected_algo)

    def _draw_panel(self):
        p = self._panel
        pygame.draw.rect(self.screen, PANEL_BG, p)

        title = self.font_big.render("Pathfinding Algorithms", True, TEXT_LIGHT)
        self.screen.blit(title, (p.x + 20, p.y + 20))

        for b in self._buttons:
            b.draw(self.screen, self.font)

        x0 = p.x + 20
        y0 = self._results_y

        def line(text, font=None, color=TEXT_LIGHT):
            nonlocal y0
            surf = (font or self.font).render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Results", font=self.font_big, color=ACCENT_GOLD)
        res = self.ctx.last_result
        line(f"Time: {res.elapsed if res else 0.0:.3f}s")
        line(f"Status: {self.ctx.status}", font=self.font_small)
        if res is None:
            line("Result: -")
        elif res.found:
            line("Result: Path found", color=FOUND_C)
        else:
            line("Result: No path", color=FAIL_C)
        line(f"Visited: {len(self.shown_visited)}" + (f" / {res.visited}" if res else ""))
        line(f"Path Len: {res.path_len if res and self.shown_path else 0}")
        line(f"Speed: {self.steps_per_sec} steps/s")

# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    try:
        settings = resolve_settings(argv)
    except ValueError as ex:
        print(f"Invalid settings: {ex}", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("starting viewer: %dx%d grid, %d steps/s",
                settings.grid_size, settings.grid_size, settings.steps_per_sec)
    Viewer(SearchContext(settings.grid_size), settings).run()

if __name__ == "__main__":
    main()
