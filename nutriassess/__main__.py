"""Run the assessment service: python -m nutriassess"""

import uvicorn
from dotenv import load_dotenv

from nutriassess.infrastructure.config import (
    get_log_level,
    get_server_host,
    get_server_port,
)


def main() -> None:
    load_dotenv()
    uvicorn.run(
        "nutriassess.app:app",
        host=get_server_host(),
        port=get_server_port(),
        log_level=get_log_level().lower(),
    )


if __name__ == "__main__":
    main()
