import pytest
from datetime import date
from gameplan.database import drop_db, init_db
from gameplan.services.weather_service import WeatherService


@pytest.fixture
def weather_service():
    """Create weather service instance"""
    init_db()
    yield WeatherService()
    drop_db()


class TestWeatherService:
    """Test forecast storage"""

    def test_create_and_get_forecast(self, weather_service):
        """Test storing a forecast"""
        result = weather_service.create_weather_forecast({
            'location': 'Riverside Park',
            'date': date(2024, 8, 3),
            'temperature': 31.5,
            'condition': 'sunny',
            'wind_speed': 12.0,
            'precipitation_chance': 10,
            'is_suitable_for_sport': True
        })
        assert result['success'] is True

        forecast = weather_service.get_forecast('Riverside Park', date(2024, 8, 3))
        assert forecast['condition'] == 'sunny'
        assert forecast['precipitation_chance'] == 10
        assert forecast['is_suitable_for_sport'] is True

    def test_latest_forecast_wins(self, weather_service):
        """Test a newer forecast replaces the older one on read"""
        for condition in ('cloudy', 'rainy'):
            weather_service.create_weather_forecast({
                'location': 'Riverside Park',
                'date': date(2024, 8, 3),
                'condition': condition,
                'is_suitable_for_sport': condition != 'rainy'
            })

        forecast = weather_service.get_forecast('Riverside Park', date(2024, 8, 3))
        assert forecast['condition'] == 'rainy'
        assert forecast['is_suitable_for_sport'] is False

    def test_missing_fields(self, weather_service):
        """Test required fields"""
        result = weather_service.create_weather_forecast({'location': 'Riverside Park'})
        assert result['error'] == 'date is required'

    def test_precipitation_bounds(self, weather_service):
        """Test precipitation percent range"""
        result = weather_service.create_weather_forecast({
            'location': 'Riverside Park',
            'date': date(2024, 8, 3),
            'condition': 'stormy',
            'precipitation_chance': 140
        })
        assert 'Precipitation' in result['error']

    def test_unknown_forecast(self, weather_service):
        """Test lookup with no stored forecast"""
        result = weather_service.get_forecast('Nowhere', date(2024, 8, 3))
        assert result['error'] == 'Forecast not found'
