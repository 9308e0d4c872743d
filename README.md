# marketcal

Business-day and holiday calendars for financial markets and countries.
Each calendar answers one question: is this date a business day? The answer
takes into account weekends, fixed-date holidays, holidays that depend on
Easter (Western or Orthodox), and the one-off closures that exchanges
publish.

## Installation

```
pip install marketcal
```

## Usage

```python
from datetime import date

from marketcal.calendar import Target, WeekendsOnly
from marketcal.unitedkingdom import UnitedKingdom, UnitedKingdomMarket
from marketcal.russia import Russia, RussiaMarket

target = Target()
target.is_business_day(date(2024, 12, 25))   # False: Christmas
target.is_holiday(date(2024, 5, 1))          # True: Labour Day

WeekendsOnly().is_business_day(date(2024, 12, 25))  # True

uk = UnitedKingdom(UnitedKingdomMarket.EXCHANGE)
uk.is_business_day(date(2022, 6, 3))         # False: Platinum Jubilee

moex = Russia(RussiaMarket.MOEX)
moex.is_business_day(date(2020, 6, 24))      # False
```

Every calendar has these members:

- `is_business_day(date)`
- `is_holiday(date)`, which is the negation of `is_business_day`
- `is_weekend(weekday)`, which takes a weekday numbered as `datetime.date.weekday()` numbers it (Monday is 0)
- a `name`

Two calendars are equal when their names are equal.

## Calendars

Some calendars cover more than one market. They take a market enum member when you build them. You may also pass the member's value, such as `"MOEX"`. A value the enum does not know raises `ValueError`.

| Module                    | Calendar                 | Markets (default in bold)                          |
|---------------------------|--------------------------|----------------------------------------------------|
| `marketcal.calendar`      | `Target`, `WeekendsOnly` | none                                               |
| `marketcal.singapore`     | `Singapore`              | `SingaporeMarket`: **SGX**                         |
| `marketcal.romania`       | `Romania`                | `RomaniaMarket`: PUBLIC, **BVB**                   |
| `marketcal.southkorea`    | `SouthKorea`             | `SouthKoreaMarket`: SETTLEMENT, **KRX**            |
| `marketcal.slovakia`      | `Slovakia`               | `SlovakiaMarket`: **BSSE**                         |
| `marketcal.taiwan`        | `Taiwan`                 | `TaiwanMarket`: **TSEC**                           |
| `marketcal.southafrica`   | `SouthAfrica`            | none                                               |
| `marketcal.russia`        | `Russia`                 | `RussiaMarket`: **SETTLEMENT**, MOEX               |
| `marketcal.saudiarabia`   | `SaudiArabia`            | `SaudiArabiaMarket`: **TADAWUL**                   |
| `marketcal.unitedkingdom` | `UnitedKingdom`          | `UnitedKingdomMarket`: **SETTLEMENT**, EXCHANGE, METALS |
| `marketcal.ukraine`       | `Ukraine`                | `UkraineMarket`: **USE**                           |
| `marketcal.nordic`        | `Norway`, `Sweden`       | none                                               |
| `marketcal.centraleurope` | `Poland`, `Switzerland`  | none                                               |

Some calendars need a note:

- The Moscow Exchange calendar (`RussiaMarket.MOEX`) only has data from 2012 onward. For earlier dates `is_business_day` raises `ValueError`.
- The Saudi Arabian calendar accounts for the weekend change of 29 June 2013. Before that date Thursday and Friday are weekend days; from that date on, Friday and Saturday are. `SaudiArabia.is_weekend` always reports Friday and Saturday.
- The one-off holidays cover only the years for which data is listed. Outside those years, only the rule-based holidays apply.

## Writing your own calendar

`marketcal.calendar` provides two Easter helpers. Both return the day of the year (counting from 1) of Easter Monday for a given year:

- `easter_monday(year)` for Western Easter
- `orthodox_easter_monday(year)` for Orthodox Easter

To build a calendar of your own:

1. Subclass `WesternCalendar` or `OrthodoxCalendar`, or `Calendar` if no holiday depends on Easter.
2. Set `name`.
3. Implement `is_business_day`.

## What this package does not do

The package only classifies single dates. It does not:

- roll dates by business-day conventions
- count business days between two dates
- combine calendars
- generate schedules

## Running the tests

```
pip install -e ".[test]"
pytest
```