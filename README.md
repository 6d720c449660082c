# wifisim

A small command-line simulator that compares how three generations of WiFi
share a 20 MHz channel between a number of users:

- **WiFi 4 (CSMA/CA)** – users sense the channel, transmit when it is free and
  back off exponentially when it is busy. Runs for 10 000 ms of simulated
  time by default. Per-user results are written to `wifi4_results.csv` in the
  current directory.
- **WiFi 5 (MU-MIMO)** – each cycle the access point broadcasts, every user
  sends channel-state feedback in turn, then all users transmit in parallel
  within a 15 ms window. Runs for 60 000 ms of simulated time by default.
- **WiFi 6 (OFDMA)** – each 5 ms round the 20 MHz channel is split into
  resource units of 2, 4 or 10 MHz, handed out to users round robin. Runs for
  100 ms of simulated time by default.

Each run prints its progress, then a per-user summary of successful
transmissions, average latency and throughput, followed by network totals.

## Installation

```
pip install .
```

## Usage

```
wifisim
```

The program asks for the number of users, or takes it from the command line:

```
wifisim --users 4
```

It then shows a menu:

```
1. WiFi 4 (CSMA/CA)
2. WiFi 5 (MU-MIMO)
3. WiFi 6 (OFDMA)
4. Exit
```

Pick a simulation to run it. The menu comes back after each run until you
choose 4 or input ends. An unknown choice is reported and the menu is shown
again. A number of users that is zero or less (or not a number) ends the
program with an error and exit status 1.

## Using it from Python

```python
from wifisim.access_point import AccessPoint
from wifisim.wifi6 import WiFi6Simulation

ap = AccessPoint(4, WiFi6Simulation(duration_ms=50))
ap.run_simulation()
for user in ap.users:
    print(user.id, user.successful_transmissions, user.average_latency)
```

`AccessPoint(num_users, simulation, packet_size=1024)` creates users with ids
1 to `num_users` on one `Channel`; it raises `ValueError` when `num_users` is
not positive. `run_simulation()` reports any error from the simulation on
standard error instead of raising it.

`WiFi4Simulation`, `WiFi5Simulation` and `WiFi6Simulation` all share the
`WiFiSimulation.run(users, channel)` interface, so you can also drive them
directly with your own list of `User` objects and a `Channel`. Each takes an
`out` argument, a text stream to write to instead of standard output, and a
simulated duration (`sim_duration` for WiFi 4, `duration_ms` for WiFi 5 and 6).
`WiFi4Simulation` also takes `results_path` for where the CSV file goes.
Note that the WiFi 4 run replaces the users in the list with fresh ones.

A `User` keeps its statistics as attributes (`successful_transmissions`,
`total_attempts`, `latencies`, `throughput`) and exposes `average_latency`
(ms) and `throughput_mbps` as properties.

## Limitations

Results are plain text and, for WiFi 4, a CSV file; the package draws no
charts. The simulations use fixed PHY parameters (20 MHz, 256-QAM, 5/6
coding) and a fixed packet size, and model no interference or signal loss.

## Running the tests

```
pip install .[test]
pytest
```