from sqlmodel import Field, SQLModel

__all__ = [
    "MovieBase",
    "Movie",
]


class MovieBase(SQLModel):
    title: str = Field(description="Title shown on tickets and in the purchase history")


class Movie(MovieBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
