from sqlalchemy import Column, String, Integer, Float, Date, Boolean
from .base import BaseModel


class WeatherForecast(BaseModel):
    __tablename__ = 'weather_forecasts'

    location = Column(String(255), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    temperature = Column(Float)
    condition = Column(String(50))  # sunny, rainy, snowy, ...
    wind_speed = Column(Float)
    precipitation_chance = Column(Integer)  # percent
    is_suitable_for_sport = Column(Boolean, default=True)
