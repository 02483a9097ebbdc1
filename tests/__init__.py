from pathlib import Path


def get_test_dir() -> Path:
    return Path(__file__).parent
