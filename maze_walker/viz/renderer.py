import pygame
from maze_walker.core.grid import CellState, Grid

class Renderer:
    COLOR_BG = (255, 255, 255)
    COLOR_WALL = (0, 0, 0)
    COLOR_EXPLORED = (16, 185, 129) # Green
    COLOR_DEADEND = (239, 68, 68)   # Red
    COLOR_EXIT = (245, 158, 11)
    COLOR_AGENT = (59, 130, 246)
    COLOR_TEXT = (20, 20, 20)

    def __init__(self, grid: Grid, runner=None, width=800, height=800, steps_per_frame=1, fps=10):
        self.grid = grid
        self.runner = runner
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame
        self.fps = fps

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.walk_finished = False

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w, available_h) / self.grid.size

        total = self.grid.size * self.cell_size
        self.offset_x = (self.screen_width - total) / 2
        self.offset_y = (self.screen_height - total) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Walker - {self.grid.size}x{self.grid.size}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def cell_rect(self, row, col):
        px = int(col * self.cell_size + self.offset_x)
        py = int(row * self.cell_size + self.offset_y)
        size = int(self.cell_size) + 1
        return px, py, size

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                self.fit_to_screen()

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(2.0, min(200.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        size = self.grid.size

        # Pass 1 - cell states
        for row in range(size):
            for col in range(size):
                state = self.grid.get_cell(row, col).state
                if state == CellState.UNEXPLORED:
                    continue
                color = self.COLOR_DEADEND if state == CellState.DEADEND else self.COLOR_EXPLORED
                px, py, s = self.cell_rect(row, col)
                pygame.draw.rect(self.surface, color, (px, py, s, s))

        er, ec = self.grid.exit_cell
        px, py, s = self.cell_rect(er, ec)
        pygame.draw.rect(self.surface, self.COLOR_EXIT, (px, py, s, s))

        # Pass 2 - walls
        for row in range(size):
            for col in range(size):
                cell = self.grid.cells[row * size + col]
                px, py, s = self.cell_rect(row, col)

                if cell & Grid.SOUTH:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + s), (px + s, py + s), 2)
                if cell & Grid.EAST:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px + s, py), (px + s, py + s), 2)
                if row == 0 and (cell & Grid.NORTH):
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + s, py), 2)
                if col == 0 and (cell & Grid.WEST):
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + s), 2)

        if self.runner:
            nav = self.runner.navigator
            px, py, s = self.cell_rect(nav.row, nav.col)
            center = (px + s // 2, py + s // 2)
            pygame.draw.circle(self.surface, self.COLOR_AGENT, center, max(2, s // 3))

    def draw_hud(self):
        if not self.runner:
            return
        stats = self.runner.navigator.get_stats()
        status = "Done" if self.walk_finished else "Running"
        info = [
            f"Steps: {stats['steps']}",
            f"Dead ends: {stats['dead_ends']}",
            f"Backtracks: {stats['backtrack_count']}",
            f"Status: {status}",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()

            if self.runner and not self.walk_finished:
                for _ in range(self.steps_per_frame):
                    if self.runner.finished:
                        self.walk_finished = True
                        break
                    self.runner.step()

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(self.fps)

        pygame.quit()
