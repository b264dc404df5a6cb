"""Run the API server: ``python -m cortex``."""

import uvicorn

from cortex_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "cortex.presentation.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )


if __name__ == "__main__":
    main()
