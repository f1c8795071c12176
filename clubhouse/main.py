import logging
import os

import psycopg2
from dotenv import load_dotenv
from fastapi import FastAPI

from clubhouse import app_context
from clubhouse.app.routes.memberships import router as memberships_router
from clubhouse.app.services.credits import get_club_config

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("clubhouse")


def get_conn():
    return psycopg2.connect(**get_club_config().db_settings())


app_context.configure(get_conn=get_conn)

app = FastAPI(title="Clubhouse Membership API")
app.include_router(memberships_router)


@app.get("/health")
def health() -> dict:
    return {"ok": True}


logger.info("Clubhouse API ready timezone=%s", get_club_config().timezone)
