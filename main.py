import logging

from config import HOST, LOG_LEVEL, PORT
from keypub.app import create_app

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("keypub")

app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info("Key publish site running at http://%s:%s/", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL)
