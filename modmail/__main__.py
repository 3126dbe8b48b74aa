"""Run the interactions webhook: ``python -m modmail``."""

import uvicorn

from modmail.adapters.web.server import create_app
from modmail.config import AppConfig

if __name__ == "__main__":
    config = AppConfig.from_env()
    uvicorn.run(create_app(config), host="0.0.0.0", port=config.port, log_level="info")
