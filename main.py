import sys

import pygame

from settings import WINDOW_WIDTH, WINDOW_HEIGHT, TITLE, FPS
from engine.config import load_config
from engine.error_handler import LOG_DIR, configure_logging, logger
from engine.game import Game
from telemetry.logger import TelemetryLogger


def main() -> None:
    configure_logging()
    config = load_config()

    telemetry = None
    if config.telemetry_enabled:
        telemetry = TelemetryLogger(LOG_DIR / "telemetry.jsonl")

    pygame.init()
    pygame.display.set_caption(TITLE)

    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    clock = pygame.time.Clock()

    game = Game(screen, config, telemetry=telemetry)
    logger.info("Started %s", TITLE)

    # --- Main loop ---
    while game.running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            game.handle_event(event)

        game.update(dt)
        game.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
