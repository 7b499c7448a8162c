import pygame
from maze_engine.core.grid import Direction
from maze_engine.algo.base import Generator
from maze_engine.viz.recorder import VideoRecorder

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_VISITED = (60, 100, 160)# Blue tint
    COLOR_STACK = (173, 216, 230)# Light blue, active path

    def __init__(self, generator: Generator, width=800, height=800, interval_ms=100, steps_per_frame=1, record=False):
        self.generator = generator
        self.screen_width = width
        self.screen_height = height

        # Pacing: run 'steps_per_frame' steps every 'interval_ms'
        self.interval_ms = interval_ms
        self.steps_per_frame = max(1, steps_per_frame)
        self.last_step_ms = 0

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.recorder = VideoRecorder(active=record)
        self.video_path = None

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None

    @property
    def size(self) -> int:
        return self.generator.grid.size

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w, available_h) / self.size

        total = self.size * self.cell_size
        self.offset_x = (self.screen_width - total) / 2
        self.offset_y = (self.screen_height - total) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Engine - {self.size}x{self.size}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    # Regenerate on the same grid
                    self.generator.reset()
                    self.generator.start()
                elif event.key == pygame.K_f:
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
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def advance(self, now_ms: int):
        if self.generator.is_complete():
            return
        if now_ms - self.last_step_ms < self.interval_ms:
            return
        self.last_step_ms = now_ms
        for _ in range(self.steps_per_frame):
            self.generator.step()
            if self.generator.is_complete():
                break

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        view = self.generator.view()
        on_stack = set(self.generator.stack_cells())
        size = int(self.cell_size) + 1
        wall_color = self.COLOR_WALL

        for cell in view:
            # Unvisited cells stay blank
            if not cell.visited:
                continue

            px = int(cell.x * self.cell_size + self.offset_x)
            py = int(cell.y * self.cell_size + self.offset_y)

            color = self.COLOR_STACK if (cell.x, cell.y) in on_stack else self.COLOR_VISITED
            pygame.draw.rect(self.surface, color, (px, py, size, size))

            if cell.has_wall(Direction.NORTH):
                pygame.draw.line(self.surface, wall_color, (px, py), (px + size, py), 1)
            if cell.has_wall(Direction.EAST):
                pygame.draw.line(self.surface, wall_color, (px + size, py), (px + size, py + size), 1)
            if cell.has_wall(Direction.SOUTH):
                pygame.draw.line(self.surface, wall_color, (px, py + size), (px + size, py + size), 1)
            if cell.has_wall(Direction.WEST):
                pygame.draw.line(self.surface, wall_color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        rec_status = "REC" if self.recorder.active else ""
        status = "Done" if self.generator.is_complete() else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.size}x{self.size}",
            f"Steps: {self.generator.step_count}",
            f"Status: {status}",
            rec_status
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.advance(pygame.time.get_ticks())

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()

            if self.recorder.active:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        self.video_path = self.recorder.stop()
        pygame.quit()
