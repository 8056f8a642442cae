import logging
import os

import crud
import database
import errors
import models
import schemas
import uvicorn
from fastapi import Depends, FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

HOST = "0.0.0.0"
PORT = 3000

# --- Logging ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
)
logger = logging.getLogger("shorturl")

# --- DB tables ---
# Postgres deployments ship with the url table already in place
if database.DATABASE_URL.startswith("sqlite"):
    models.Base.metadata.create_all(bind=database.engine)

app = FastAPI(
    title="Short URL",
    description="Store long URLs under numeric ids and resolve them back.",
    version="1.0.0",
)

app.add_exception_handler(errors.AppError, errors.app_error_handler)
app.add_exception_handler(RequestValidationError, errors.validation_error_handler)

@app.get("/", response_class=PlainTextResponse)
def root():
    return "Hello, World!"

# ---------- API ----------
@app.post(
    "/api/url",
    response_model=schemas.DataOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ErrorOut}, 500: {"model": schemas.ErrorOut}},
)
def create_url(url_in: schemas.UrlCreate, db=Depends(database.get_db)):
    try:
        short_url = crud.create_url(db, url_in.data.url)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to save URL %s", url_in.data.url)
        raise errors.CouldNotCreate()
    logger.info("Created URL %s -> %s", short_url.id, short_url.url)
    return {"data": str(short_url.id)}

@app.get(
    "/{url_id}",
    response_model=schemas.DataOut,
    responses={400: {"model": schemas.ErrorOut}, 404: {"model": schemas.ErrorOut}},
)
def get_url(url_id: str, db=Depends(database.get_db)):
    parsed_id = crud.parse_url_id(url_id)
    if parsed_id is None:
        logger.info("Rejected malformed URL id %r", url_id)
        raise errors.InvalidUrlId()
    try:
        short_url = crud.get_url(db, parsed_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch URL %s", parsed_id)
        raise errors.CouldNotFetch()
    if short_url is None:
        logger.info("URL %s not found", parsed_id)
        raise errors.CouldNotFetch()
    return {"data": short_url.url}


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
