"""
Stress test for thread-safety of the engine.

Every thread runs the same calendar operations over many zones and
instants; the results must match a single-threaded run exactly.
Note this isn't a unit test, because it's slow and prints timings.
"""

import sys
import time
from threading import Thread

from epochal import (
    MONDAY,
    Zone,
    add_days_z,
    end_of_month,
    from_date_tuple,
    start_of_week,
    to_date_tuple,
    to_iso8601_date_time,
)

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 50
TIMEZONE_SAMPLE = [
    "UTC",
    "America/Guyana",
    "Etc/GMT-11",
    "Europe/Vienna",
    "America/Rainy_River",
    "Asia/Ulaanbaatar",
    "US/Alaska",
    "America/Rankin_Inlet",
    "Arctic/Longyearbyen",
    "Pacific/Bougainville",
    "Africa/Monrovia",
    "Europe/Copenhagen",
    "America/Hermosillo",
    "Africa/Brazzaville",
    "Asia/Tashkent",
    "Pacific/Saipan",
    "Europe/Tallinn",
    "Africa/Nairobi",
    "America/Argentina/Ushuaia",
    "Brazil/Acre",
    "America/New_York",
]
assert (
    len(TIMEZONE_SAMPLE) % NUM_THREADS
), "Timezone sample should not be evenly divisible by number of threads"
ZONES = [Zone.iana(key) for key in TIMEZONE_SAMPLE]
# Roughly every 11 days over 1990-2030
INSTANTS = range(631152000000, 1893456000000, 987_654_321)


def run_engine(zones):
    """Exercise the zone-aware operations, returning formatted results"""
    out = []
    for zone in zones:
        for t in INSTANTS:
            out.append(
                (
                    to_iso8601_date_time(zone, end_of_month(zone, t)),
                    to_iso8601_date_time(zone, start_of_week(zone, MONDAY, t)),
                    to_iso8601_date_time(zone, add_days_z(3, zone, t)),
                    from_date_tuple(zone, to_date_tuple(zone, t)),
                )
            )
    return out


def main():
    print(f"Starting test: {run_engine.__name__}")
    expected = run_engine(ZONES)
    results = {}

    def target(n):
        for _ in range(NUM_ITERATIONS):
            results[n] = run_engine(ZONES)

    threads = []
    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=target, args=(n,))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    assert all(r == expected for r in results.values()), "Results differ"
    assert len(results) == NUM_THREADS
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main()
