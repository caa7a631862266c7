import argparse
import sys

import pygame
from loguru import logger

from game_of_life.config import ConfigError, load_config, setup_logging
from game_of_life.driver import GameDriver

INTERVAL_STEP_MS = 10


def draw_board(window, driver: GameDriver, cell_color, grid_color) -> None:
    size = driver.cell_size
    width = driver.cols * size
    height = driver.rows * size

    # Grid lines
    for col in range(driver.cols + 1):
        pygame.draw.line(window, grid_color, (col * size, 0), (col * size, height))
    for row in range(driver.rows + 1):
        pygame.draw.line(window, grid_color, (0, row * size), (width, row * size))

    # Live cells, inset by the grid line
    for x, y in driver.cells():
        rect = (x * size + 1, y * size + 1, size - 1, size - 1)
        pygame.draw.rect(window, cell_color, rect)


def update_caption(driver: GameDriver) -> None:
    state = "running" if driver.is_running else "stopped"
    pygame.display.set_caption(
        f"Conway's Game of Life | gen {driver.generation}, "
        f"alive {driver.board.population}, every {driver.interval_ms} ms ({state})"
    )


def handle_key(driver: GameDriver, key: int, now_ms: int, density: float) -> bool:
    """Apply a key press; return False when the user asked to quit."""
    if key in (pygame.K_ESCAPE, pygame.K_q):
        return False
    if key == pygame.K_SPACE:
        if driver.is_running:
            driver.stop()
        else:
            driver.run(now_ms)
    elif key == pygame.K_n and not driver.is_running:
        driver.step()
    elif key == pygame.K_c:
        driver.clear()
    elif key == pygame.K_r:
        driver.randomize(density)
    elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS, pygame.K_UP):
        driver.adjust_interval(INTERVAL_STEP_MS)
    elif key in (pygame.K_MINUS, pygame.K_KP_MINUS, pygame.K_DOWN):
        driver.adjust_interval(-INTERVAL_STEP_MS)
    return True


def run_display(
    driver: GameDriver,
    window_width: int = 800,
    window_height: int = 600,
    background_color: str = "white",
    cell_color: str = "black",
    grid_color: str = "lightgray",
    fps: int = 60,
    random_density: float = 0.3,
) -> None:
    # Initialise pygame
    pygame.init()

    window = pygame.display.set_mode((window_width, window_height))

    cell_fill_color = pygame.Color(cell_color)
    grid_line_color = pygame.Color(grid_color)
    background_fill_color = pygame.Color(background_color)

    clock = pygame.time.Clock()
    running = True

    try:
        while running:
            now_ms = pygame.time.get_ticks()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(driver, event.key, now_ms, random_density)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    driver.click(*event.pos)

            driver.tick(now_ms)

            window.fill(background_fill_color)
            draw_board(window, driver, cell_fill_color, grid_line_color)
            update_caption(driver)
            pygame.display.flip()

            clock.tick(fps)
    finally:
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Conway's Game of Life")
    parser.add_argument("--config", "-c", help="Path to a TOML config file")
    parser.add_argument("--rows", type=int, help="Override the number of grid rows")
    parser.add_argument("--cols", type=int, help="Override the number of grid columns")
    parser.add_argument("--interval", type=int, help="Step interval in milliseconds")
    parser.add_argument("--random", action="store_true", help="Start from a random board")
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument("--log-level", help="Override the configured log level")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging()
        logger.error(str(e))
        sys.exit(1)

    log_level = args.log_level or config.logging.log_level
    try:
        setup_logging(log_level, config.logging.log_file)
    except ValueError as e:
        setup_logging()
        logger.error(f"Invalid log level {log_level!r}: {e}")
        sys.exit(1)

    display = config.display
    rows = args.rows if args.rows is not None else config.rows
    cols = args.cols if args.cols is not None else config.cols
    interval = args.interval if args.interval is not None else config.simulation.interval_ms

    try:
        driver = GameDriver(rows, cols, cell_size=display.cell_size, interval_ms=interval)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)

    if args.random:
        driver.randomize(config.simulation.random_density, seed=args.seed)

    logger.info(f"Grid: {rows}×{cols}, cell size {display.cell_size}px, interval {interval} ms")
    run_display(
        driver,
        window_width=cols * display.cell_size,
        window_height=rows * display.cell_size,
        background_color=display.background_color,
        cell_color=display.cell_color,
        grid_color=display.grid_color,
        fps=display.fps,
        random_density=config.simulation.random_density,
    )


if __name__ == "__main__":
    main()
