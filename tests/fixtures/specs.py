"""Sample OpenAPI documents and agent configurations shared by the tests."""

SAMPLE_SPEC_TEXT = """openapi: 3.0.0
info:
  title: Open-Meteo APIs
  description: 'Open-Meteo offers free weather forecast APIs for open-source developers and non-commercial use.'
  version: '1.0'
paths:
  /v1/forecast:
    servers:
      - url: https://api.open-meteo.com
    get:
      summary: 7 day weather forecast for coordinates
      parameters:
        - name: latitude
          in: query
          required: true
          schema:
            type: number
        - name: longitude
          in: query
          required: true
          schema:
            type: number
        - name: current_weather
          in: query
          schema:
            type: boolean
      responses:
        '200':
          description: OK
"""

SAMPLE_AGENT_CONFIG = {
    "name": "Open Meteo",
    "description": "Weather forecasts",
    "headers": {"X-Api-Key": "{SPECAGENT_TEST_KEY}"},
}

FORECAST_CALL = {
    "base_url": "https://api.open-meteo.com",
    "endpoint": "/v1/forecast",
    "method": "GET",
    "query_params": {"latitude": 40.7128, "longitude": -74.006, "current_weather": True},
}
