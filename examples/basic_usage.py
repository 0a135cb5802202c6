#!/usr/bin/env python3
"""
Basic usage example for the KVParse module.
"""
import io

from KVParse import IllegalValueError, Settings, ValueType

CONFIG = """
# GA run settings
population_size: 200
generations = 500
mutation_rate: 0.015
elitism: yes
operators: crossover
operators: mutation
weights: 0.5 0.25 0.25
label: "baseline run"
"""


def main():
    """Main function."""
    settings = Settings()
    settings.parse("example.cfg", io.StringIO(CONFIG))

    print("Everything that was read:")
    settings.dump()

    print("\nTyped values:")
    print("population_size =", settings.get_unsigned("population_size", required=True))
    print("generations     =", settings.get_integer("generations"))
    print("mutation_rate   =", settings.get_double("mutation_rate"))
    print("elitism         =", settings.get_boolean("elitism", default=False))
    print("operators       =", settings.get_list("operators"))
    print("weights         =", settings.get_vector("weights", ValueType.DOUBLE))
    print("label           =", settings.get_string("label"))
    print("seed (default)  =", settings.get_unsigned("seed", default=12345))

    # Errors can be caught ...
    try:
        settings.get_integer("label")
    except IllegalValueError as e:
        print(f"\nError: {e}")

    # ... or inspected without exceptions
    result = settings.lookup("operators", ValueType.STRING)
    print(f"lookup('operators'): {result.status.value} ({result.error})")


if __name__ == "__main__":
    main()
