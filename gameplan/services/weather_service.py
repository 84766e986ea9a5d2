from datetime import date
from typing import Dict
from sqlalchemy.exc import SQLAlchemyError
from gameplan.models import WeatherForecast
from gameplan.repository import SchedulingRepository
from gameplan.utils.logger import get_logger

logger = get_logger(__name__)


class WeatherService:
    """Stores forecasts per location and date"""

    def __init__(self, repository: SchedulingRepository = None):
        self.repository = repository or SchedulingRepository()

    def create_weather_forecast(self, data: Dict) -> Dict:
        required_fields = ['location', 'date', 'condition']
        for field in required_fields:
            if not data.get(field):
                return {'error': f'{field} is required'}

        precipitation = data.get('precipitation_chance', 0)
        if not 0 <= precipitation <= 100:
            return {'error': 'Precipitation chance must be between 0 and 100'}

        try:
            forecast = self.repository.create_forecast({
                'location': data['location'],
                'date': data['date'],
                'temperature': data.get('temperature'),
                'condition': data['condition'],
                'wind_speed': data.get('wind_speed'),
                'precipitation_chance': precipitation,
                'is_suitable_for_sport': data.get('is_suitable_for_sport', True)
            })

            logger.info(f"Weather forecast stored for {forecast.location} on {forecast.date}")

            return {'forecast_id': forecast.id, 'success': True}

        except SQLAlchemyError as e:
            logger.error(f"Error creating weather forecast: {str(e)}")
            return {'error': 'Failed to create weather forecast'}

    def get_forecast(self, location: str, forecast_date: date) -> Dict:
        """Latest forecast recorded for the location and date"""
        forecast = self.repository.get_forecast(location, forecast_date)
        if not forecast:
            return {'error': 'Forecast not found'}
        return self._format_forecast(forecast)

    def _format_forecast(self, forecast: WeatherForecast) -> Dict:
        return {
            'id': forecast.id,
            'location': forecast.location,
            'date': forecast.date.isoformat(),
            'temperature': forecast.temperature,
            'condition': forecast.condition,
            'wind_speed': forecast.wind_speed,
            'precipitation_chance': forecast.precipitation_chance,
            'is_suitable_for_sport': forecast.is_suitable_for_sport
        }
