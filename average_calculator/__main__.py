import uvicorn

from average_calculator.core.config import settings


def main():
    uvicorn.run(
        "average_calculator.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
