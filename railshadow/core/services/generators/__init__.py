"""
Generators — render Rails shadow artifacts from description records.

Each generator module exposes a ``generate()`` function that returns
a list of ``GeneratedFile`` instances. Generators never touch the
filesystem except to look up template overrides; writing is the
caller's job, so a dry run and a real run render identical text.
"""
