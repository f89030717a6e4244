import logging
import sys

logger = logging.getLogger("pokemon_shiritori")
logger.setLevel(logging.INFO)

# Streamlit の再実行でモジュールが読み直されてもハンドラを重複させない
if not logger.handlers:
    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.INFO)  # INFO 以上（WARNING 以上は stderr にも出る）
    stderr_handler.setLevel(logging.WARNING)

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    stdout_handler.setFormatter(formatter)
    stderr_handler.setFormatter(formatter)

    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
    logger.propagate = False
