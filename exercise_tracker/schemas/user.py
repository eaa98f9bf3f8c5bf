"""User Schemas — response contracts for the users endpoints.

Invariants:
    - Serialized id key is "_id" (public contract), key order {username, _id}

Design Decisions:
    - alias + populate_by_name: services hand over wire dicts keyed "_id",
      FastAPI re-serializes by alias
"""

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public user representation."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")
