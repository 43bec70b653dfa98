from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


class CarRead(BaseModel):
    id: int
    name: str = Field(min_length=1)
    category: str
    price: NonNegativeInt | NonNegativeFloat
    image: str = ""
    transmission: str = ""

    model_config = ConfigDict(from_attributes=True)
