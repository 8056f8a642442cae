from pydantic import BaseModel, StrictStr, field_validator


class UrlIn(BaseModel):
    url: StrictStr

    @field_validator("url")
    @classmethod
    def encodable(cls, value: str) -> str:
        # JSON escapes can smuggle in lone surrogates the database can't store
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("url must be valid unicode")
        return value

class UrlCreate(BaseModel):
    data: UrlIn

class DataOut(BaseModel):
    data: str

class ErrorOut(BaseModel):
    error: str
