from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    image: str = ""
    views: int = 0


class CollectionStats(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    page: int = 1
    per_page: int = Field(default=0, alias="perPage")
    total_items: int = Field(default=0, alias="totalItems")
    total_pages: int = Field(default=0, alias="totalPages")


class RecordList(CollectionStats):
    items: list[Record] = Field(default_factory=list)


class CountResponse(BaseModel):
    count: int


class ErrorResponse(BaseModel):
    error: str
