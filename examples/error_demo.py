"""
Error location demonstration for jsonsalve.
"""

import jsonsalve
from jsonsalve import ParseConfig, ParseError


def main():
    print("jsonsalve - Error Location Demo")
    print("=" * 31)

    # Example 1: Diagnostic with position
    print("\n1. Diagnostic with Position Information")
    outcome = jsonsalve.process('{"key": }')
    diagnostic = outcome.diagnostic
    print(f"Offset {diagnostic.offset}, line {diagnostic.line}, column {diagnostic.column}")

    # Example 2: Context around the error
    print("\n2. Context Around the Error")
    outcome = jsonsalve.process('{\n  "name": "Ann"\n  "age": 30\n}')
    context = outcome.context
    print(f"Before: {context.before!r}")
    print(f"At:     {context.offending_char!r}")
    print(f"After:  {context.after!r}")

    # Example 3: Original vs repaired location
    print("\n3. Original and Repaired Locations")
    outcome = jsonsalve.process("{'key': }")
    print(f"Original text {outcome.original.text!r} fails at offset "
          f"{outcome.original_diagnostic.offset}")
    print(f"Repaired text {outcome.repaired.text!r} fails at offset "
          f"{outcome.diagnostic.offset}")
    print(f"Changes: {list(outcome.change_log)}")

    # Example 4: Raising interface
    print("\n4. Raising Interface")
    try:
        jsonsalve.loads('{"key": 1}}')
    except ParseError as e:
        print(f"{type(e).__name__}: {e}")

    # Example 5: Strict mode without repair
    print("\n5. Strict Mode")
    config = ParseConfig(auto_repair=False)
    outcome = jsonsalve.process('{"key": 1,}', config)
    print(jsonsalve.ErrorReporter(config).format_outcome(outcome))

    # Example 6: Path lookup
    print("\n6. Path Lookup")
    outcome, value = jsonsalve.query("{users: [{name: 'Ann'}]}", "users.0.name")
    print(f"users.0.name = {value!r} ({outcome.status.value})")


if __name__ == "__main__":
    main()
