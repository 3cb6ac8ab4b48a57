"""
Weather Tool (fixed forecast)
"""

from toolhub.api.decorators import mcp_tool


class WeatherService:

    @mcp_tool(
        "Get weather forecast for a specific latitude/longitude",
        name="get_weather_forecast",
        category="weather",
        tags=("weather", "forecast", "location"),
        cacheable=True,
        cache_ttl_seconds=300,
    )
    def get_weather_forecast_by_location(self, latitude: float, longitude: float) -> str:
        return f"Weather forecast for location ({latitude:f}, {longitude:f}): Sunny, 25°C"
