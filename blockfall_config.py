
CONFIG = {
    "CELL_SIZE": 32,
    "TICK_MS": 500,
    "FPS": 60,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_INTERVAL_MS": 50,
    "SEED": None,
    "LOG_LEVEL": "WARNING",
}
