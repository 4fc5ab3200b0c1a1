"""Run the API with uvicorn: python -m life_mapper.api"""

import uvicorn

from life_mapper.config import settings


def main() -> None:
    uvicorn.run(
        "life_mapper.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
