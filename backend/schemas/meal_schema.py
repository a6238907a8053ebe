from pydantic import BaseModel
from typing import List

class Meal(BaseModel):
    name: str
    description: str
    ingredients: List[str]

class IngredientsResponse(BaseModel):
    ingredients: str

class MealsRequest(BaseModel):
    ingredients: str

class MealsResponse(BaseModel):
    meals: List[Meal]
