"""
jsonsalve demonstration script.
"""

import jsonsalve
from jsonsalve import ErrorReporter, FailureOutcome, RepairedOutcome


def main():
    print("jsonsalve - Tolerant JSON Formatter Demo")
    print("=" * 40)

    examples = [
        # Valid JSON
        ('{"name": "John", "age": 30}', "Valid JSON"),
        # Trailing commas
        ('{"items": [1, 2, 3,], "active": true,}', "Trailing commas"),
        # Single quotes and a missing brace
        ("{'name': 'John', 'age': 30", "Single quotes, unclosed object"),
        # Unquoted keys
        ("{name: \"John\", age: 30}", "Unquoted keys"),
        # Commented configuration
        (
            """
        {
            // server settings
            server: {
                host: 'localhost',
                port: 8080 /* default */
            },
            features: ['auth', 'logging',],
        }
        """,
            "Commented configuration",
        ),
        # Beyond repair
        ('{"key": }', "Missing value"),
    ]

    reporter = ErrorReporter()
    for i, (json_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {json_str.strip()}")

        outcome = jsonsalve.process(json_str, indent_size=2)
        if isinstance(outcome, FailureOutcome):
            print(reporter.format_failure(outcome))
            continue

        if isinstance(outcome, RepairedOutcome):
            print(reporter.format_change_log(outcome.change_log))
        print(f"Output:\n{outcome.formatted_text}")
        print(f"Stats:  {outcome.stats.character_count} chars, "
              f"{outcome.stats.line_count} lines, {outcome.stats.human_size}")

    # Compact output
    print(f"\n{len(examples) + 1}. Compact output")
    outcome = jsonsalve.process("{a: [1, 2, 3,],}", compact=True)
    print(f"Output: {outcome.formatted_text}")


if __name__ == "__main__":
    main()
