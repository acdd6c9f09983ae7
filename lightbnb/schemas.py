from typing import Optional
from pydantic import BaseModel, Field

# ==== Inputs accepted by the query gateway ====
# The gateway also takes plain mappings with the same keys.

class UserIn(BaseModel):
    name: str
    email: str
    password: str

class PropertySearch(BaseModel):
    city: Optional[str] = None
    owner_id: Optional[int] = None
    # Whole currency units; converted to cents when the query is built
    minimum_price_per_night: Optional[float] = None
    maximum_price_per_night: Optional[float] = None
    minimum_rating: Optional[float] = None

class PropertyIn(BaseModel):
    owner_id: int
    title: str
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: int = Field(default=0, description="Integer cents")
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    country: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
