#!/usr/bin/env python3
"""
Demo: Render the example names in all their forms.

Shows the human-readable string, the data string, and the YAML document
for each example, then parses the data string back.
"""

from namecore.examples import build_example_names
from namecore.parser import parse_data_string
from namecore.serialization import name_to_yaml


def main():
    print("=" * 80)
    print("NAME DEMO")
    print("=" * 80)

    for label, name in build_example_names().items():
        print(f"\n{label.upper()}:")
        print("-" * 80)
        print(f"   Components:  {name.get_no_components()}")
        print(f"   as_string:   {name.as_string()}")
        print(f"   as_string(' / '): {name.as_string(' / ')}")

        data = name.as_data_string()
        print(f"   Data string: {data}")

        restored = parse_data_string(data)
        print(f"   Parsed back: {restored.as_string()} ({restored.get_no_components()} components)")

        print("   YAML:")
        for line in name_to_yaml(name).splitlines():
            print(f"      {line}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
