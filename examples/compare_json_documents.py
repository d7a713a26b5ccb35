"""Example of diffing two parsed JSON documents.

This example demonstrates matching list elements by an identity field,
so reordered items are not reported as changes, and filtering out diffs
for a volatile field.
"""

import json

from deepequal import compare, configure, equal

BEFORE = """
{
    "host": "db-01",
    "updated_at": "2024-01-01T00:00:00Z",
    "services": [
        {"name": "cron", "user": "root"},
        {"name": "web", "user": "www", "port": 80}
    ]
}
"""

AFTER = """
{
    "host": "db-01",
    "updated_at": "2024-02-01T00:00:00Z",
    "services": [
        {"name": "web", "user": "www", "port": 8080},
        {"name": "cron", "user": "root"},
        {"name": "backup", "user": "root"}
    ]
}
"""


def skip_timestamps(a, b, text):
    # Keep every diff except the ones for updated_at
    return not text.startswith("map[updated_at]")


def main():
    before = json.loads(BEFORE)
    after = json.loads(AFTER)

    print("Positional comparison:")
    with configure(max_diff=50):
        for line in equal(before, after):
            print(f"  {line}")

    print("\nMatched by service name, timestamps ignored:")
    diffs = compare(
        before,
        after,
        match_keys={"services": ["name"]},
        diff_filter=skip_timestamps,
        on_error=lambda message, fatal: print(f"  ! {message}"),
    )
    for line in diffs:
        print(f"  {line}")


if __name__ == "__main__":
    main()
