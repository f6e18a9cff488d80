# weathercep

A small HTTP service that takes a Brazilian postal code (CEP), looks up the
city and state through ViaCEP, fetches the current temperature for that city
from WeatherAPI and returns it in Celsius, Fahrenheit and Kelvin.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

Settings are read from the environment. A `.env` file in the current working
directory is loaded at startup if one is present; values already set in the
environment are not overridden.

| Variable          | Meaning                                                   | Default |
|-------------------|-----------------------------------------------------------|---------|
| `WEATHER_API_KEY` | Key for WeatherAPI; required for temperatures             | unset   |
| `PORT`            | Port the server listens on (all interfaces)               | `8080`  |
| `GIN_MODE`        | `release` quiets the per-request log of the web server    | unset   |

Example `.env`:

```
WEATHER_API_KEY=placeholder
PORT=8080
```

## Running

```
weathercep
```

The command takes no options besides `--help`. It serves the API with Flask's
built-in server and exits with status 1 if `PORT` is not a number or the
server cannot start. For production use, serve the application returned by
`weathercep.app.create_app()` with a WSGI server of your choice.

## Endpoints

### `GET /health`

```json
{"status": "ok", "message": "Weather CEP API is running"}
```

### `GET /temperature/<cep>`

The CEP may be written as `01310100` or `01310-100`; surrounding whitespace
is ignored.

| Status | Body                                                  | When                                            |
|--------|-------------------------------------------------------|-------------------------------------------------|
| 200    | `{"temp_C": 25.0, "temp_F": 77.0, "temp_K": 298.0}`   | success                                         |
| 422    | `invalid zipcode`                                     | the CEP is not eight digits                     |
| 404    | `can not find zipcode`                                | ViaCEP does not know the CEP or answers non-200 |
| 500    | `internal server error`                               | the CEP lookup failed otherwise                 |
| 500    | `error fetching weather data`                         | the weather lookup failed, or no API key is set |

Conversions use `F = C * 1.8 + 32` and `K = C + 273`.

All responses carry permissive CORS headers, and `OPTIONS` requests are
answered with `204`.

## Using it from Python

```python
from weathercep.app import create_app
from weathercep.cep_service import CEPService
from weathercep.handlers import WeatherHandler
from weathercep.http_client import UrllibClient
from weathercep.weather_service import WeatherService

client = UrllibClient(timeout=10)
handler = WeatherHandler(CEPService(client), WeatherService(client, "placeholder"))
app = create_app(handler)
```

`create_app()` without a handler uses live services, taking the API key from
`WEATHER_API_KEY` (`WeatherService.from_env()`).

The services can be used on their own:

- `CEPService.get_location_by_cep(cep)` returns a `LocationInfo` (`city`,
  `state`, `cep` formatted as `12345-678`). It raises `InvalidZipcodeError`
  for a malformed code, `ZipcodeNotFoundError` for an unknown one, and
  `CEPServiceError` (their common base) for transport or decoding failures.
- `WeatherService.get_temperature_by_city(city, state)` returns a
  `TemperatureResponse` (`temp_c`, `temp_f`, `temp_k`) and raises
  `WeatherServiceError` on any failure.

Any object with a `get(url)` method returning an `HTTPResponse` (and raising
`OSError` when no response is obtained) can stand in for `UrllibClient`, which
is handy in tests.

The helpers in `weathercep.validator` (`is_valid_cep`, `normalize_cep`,
`format_cep`) and `weathercep.temperature` (`celsius_to_fahrenheit`,
`celsius_to_kelvin`, `convert_temperatures`) can also be used on their own.

## What it does not do

There is no caching of lookups and no retrying: every request queries ViaCEP
and WeatherAPI afresh.