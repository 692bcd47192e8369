from sqlalchemy import create_engine
from sqlmodel import Session

from jobly.config import DATABASE_URL, SQL_ECHO

engine = create_engine(DATABASE_URL, echo=SQL_ECHO)

def get_session():
    with Session(engine) as session:
        yield session
