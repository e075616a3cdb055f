from loguru import logger
import os

LOG_FORMAT = "{time} | {level} | {message}"


def _by_type(log_type: str):
    return lambda record: record["extra"].get("log_type") == log_type


def setup_logging(log_dir: str = "logs"):
    """Route application logs into per-concern files under ``log_dir``."""
    # Create folder if missing
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # Remove default handler
    logger.remove()

    # General application log
    logger.add(
        f"{log_dir}/app.log",
        rotation="1 week",
        retention="4 weeks",
        level="INFO",
        enqueue=True,
        format=LOG_FORMAT,
    )

    # Booking, payment and admin activity logs
    for log_type, filename in (
        ("booking", "bookings.log"),
        ("payment", "payments.log"),
        ("admin", "admin.log"),
    ):
        logger.add(
            f"{log_dir}/{filename}",
            rotation="1 week",
            retention="4 weeks",
            level="INFO",
            enqueue=True,
            filter=_by_type(log_type),
            format=LOG_FORMAT,
        )

    # Error logs
    logger.add(
        f"{log_dir}/errors.log",
        rotation="1 week",
        retention="8 weeks",
        level="ERROR",
        enqueue=True,
    )

    return logger


def get_logger():
    return logger
