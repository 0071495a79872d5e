# fakerfactory

Generates fake records for testing: colours, genders, car brands, ages,
Chinese administrative addresses, flights, trains and seats, network values
(IP and MAC addresses, device ids, passwords, user agents) and mobile network
identifiers (IMSI, IMEI, MEID). Records are served as JSON over HTTP, and the
generators can also be called directly from Python.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running the server

    fakerfactory [PORT] [DB_PATH]

`PORT` defaults to `8001` and `DB_PATH` to `./data/data.db`. The database must
be an existing SQLite file; it holds the `cnarea_2016` table of Chinese
administrative areas used by the `address` column. If it cannot be opened the
command reports the error and stops. Request logs are written to `serve.log`
in the working directory, which is overwritten on each start. Cross-origin
requests are allowed from any origin, and preflight `OPTIONS` requests are
answered.

### Requesting records

Both endpoints take a comma-separated list of columns and the number of
records to build. At most 10000 records are returned per request.

    GET  /api/v1/fakerfactory?columns=color,ipv4,imei&number=5
    POST /api/v1/fakerfactory   {"columns": "color,ipv4,imei", "number": "5"}

In the POST body both fields must be strings. A successful reply:

    {
      "status": {"status": "ok", "code": "0"},
      "data": {"count": 5, "records": [{"color": "...", "ipv4": "...", "imei": "..."}, ...]}
    }

When `number` is zero or negative, `count` is `0` and `records` is `null`.

When a parameter is missing or empty, `status.status` is `"error"`,
`status.code` is `"100"` and `data.count` is `null`; the GET endpoint answers
this with status 200, the POST endpoint with 400. A `number` that is not an
integer gives a 500 error.

### Columns

Column names are matched case-insensitively; each record keeps the names as
they were given.

| Column | Value |
| --- | --- |
| `color`, `sex`, `carbrand` | Chinese colour, gender, car brand |
| `age` | age between 0 and 105, as text |
| `address` | area record from the database: `area_code`, `zip_code`, `city_code`, `area_name`, `name`, `short_name`, `lng`, `lat` |
| `password` | 10 characters from letters, digits, symbols and space |
| `ipv4`, `ipv6`, `mac`, `useragent` | network data |
| `imsi`, `imei`, `meid`, `deviceid` | device identifiers |
| `voyage`, `airlineinfo`, `flightseat` | flight number, airline `{"code", "name"}`, seat |
| `traintrips`, `trainseat` | train number and seat |
| `date` | current local time as `YYYYMMDD,hh:mm:ss` |
| `capturetime` | current Unix time in seconds |

`gapassport` and `twpassport` yield `"暂未支持"`; any other column name yields
`"暂未支持的字段"`.

## What the package does not generate

There are no generators for personal names, nicknames, user names, jobs, ID
card numbers, phone numbers, city dialling codes, e-mail addresses, websites,
URLs or airports. The columns `name`, `job`, `idcard`, `citycode`,
`mobilephone`, `telphone`, `specialphone`, `email`, `imid`, `nickname`,
`username`, `website`, `url` and `airport` are therefore answered with the
"not supported" marker like any unknown column.

## Using the generators from Python

    from fakerfactory.core import seed, number, numerify, lexify
    from fakerfactory.attributes import color, gender
    from fakerfactory.internet import ipv4_address, mac_address
    from fakerfactory.phone import imei, luhn
    from fakerfactory.useragent import user_agent

    seed(11)                     # fixed seed for repeatable output; 0 seeds from the clock
    number(50, 23456)            # integer in the closed range
    numerify("###-###-####")     # '#' becomes a digit; a leading '0' becomes non-zero
    lexify("?????")              # '?' becomes a lower-case letter
    color("zh_CN", "en_US")      # picks one of the given languages at random
    mac_address(":", True)       # upper-case MAC address with ':' separators
    imei()                       # 15 digits, the last one a Luhn check digit
    user_agent()

The modules:

- `fakerfactory.core`: `seed`, `rand_value`, `rand_int_range` (raises
  `ValueError` on an empty range), `rand_float_range`, `number`, the
  fixed-width `uint8` … `uint64`, `int8` … `int64`, `float32`, `float64`,
  `numerify`, `lexify`, `letter`, `shuffle_ints` and `shuffle_strings` (which
  return a new list), `rand_string`, `rand_bool`.
- `fakerfactory.data`: the word lists and `has_values(category, key)`.
- `fakerfactory.dates`: `now_timestamp`, `now_date`, `date` (a random UTC
  `datetime`), `date_range(start, end)` (naive inputs read as UTC), `month`,
  `day`, `week_day`, `year`, `hour`, `minute`, `second`, `nanosecond`,
  `birthday` (`YYYYMMDD`), `age`.
- `fakerfactory.attributes`: `color`, `car_brand`, `gender`, each taking one or
  more of `zh_CN` and `en_US`; an unknown language gives `""`.
- `fakerfactory.internet`: `domain_suffix`, `http_method`, `ipv4_address`,
  `ipv6_address`, `mac_address(sep, upper)`, `rand_mac_address`, `device_id`,
  `password(lower, upper, numeric, special, space, length)`.
- `fakerfactory.useragent`: `user_agent`, `chrome_user_agent`,
  `firefox_user_agent`, `safari_user_agent`, `opera_user_agent`.
- `fakerfactory.phone`: `imsi`, `imei`, `meid(letter_type)` (`True` gives lower
  case), `rand_meid`, `luhn(digits)`.
- `fakerfactory.travel`: `voyage`, `airline_name`, `airline_info`,
  `train_seat`, `flight_seat`, `train_trips`.
- `fakerfactory.database`: `connect_sqlite`, `create_conn`, `query_sqlite`
  (rows as dicts of text, `NULL` as `"NULL"`), `address_columns`, `address`.
- `fakerfactory.server`: `match_faker`, `fake_records`, `create_app(conn)`
  (the Flask application) and `main`.

## Building the area database

    fakerfactory-cnarea [--db PATH] [--host HOST] [--port PORT] [--user USER] [--password PASSWORD] [--database NAME]

`fakerfactory-cnarea` deletes the SQLite file at `--db` (default
`../bin/data/data.db`), creates an empty `cnarea_2016` table in a fresh one,
reads every row of `cnarea_2016` from the MySQL server (defaults: `localhost`,
port `3306`, user `root`, database `cnarea`) and inserts them in one
transaction, storing MySQL's `merger_name` as `area_name`. It prints the row
count and the time taken. The same steps are available as `init_sqlite`,
`extract_mysql` and `load_sqlite` in `fakerfactory.cnarea`.