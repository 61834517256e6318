"""Team data model."""

from pydantic import BaseModel, StrictStr


class Team(BaseModel):
    """Represents a team. Placeholder teams have a name but no id yet."""

    id: StrictStr = ""
    name: StrictStr
