import json
import sqlite3

from toolhub.api.main import ToolhubApp
from toolhub.builtin.tools import FileService, SqlService, WeatherService
from toolhub.config.settings import ToolhubSettings
from toolhub.infra.logging import configure_logging


def main():
    settings = ToolhubSettings.from_env()
    configure_logging(settings.log_level, json_format=settings.log_json)

    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE cities (name TEXT, latitude REAL, longitude REAL)")
    conn.execute("INSERT INTO cities VALUES ('Seattle', 47.6062, -122.3321)")

    app = ToolhubApp(settings)
    app.scan(WeatherService(), FileService(), SqlService(conn))

    # What a model would be shown
    for definition in app.tool_definitions():
        print(json.dumps(definition.model_dump(by_alias=True)))

    print(app.call("list_tables"))
    print(app.call("query_sql", '{"sql": "SELECT * FROM cities"}'))
    print(app.call("get_weather_forecast", '{"latitude": 47.6062, "longitude": -122.3321}'))
    print(app.call("get_weather_forecast", '{"latitude": "north"}'))

if __name__ == "__main__":
    main()
