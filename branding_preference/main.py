import logging

import uvicorn

from branding_preference.core.config import Config


def main() -> None:
    """Validate configuration, install the log sink once, then serve."""
    Config.validate()
    logging.basicConfig(
        level=Config.log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()],
    )
    uvicorn.run("branding_preference.app:app", host=Config.HOST, port=Config.PORT)


if __name__ == "__main__":
    main()
