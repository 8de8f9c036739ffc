"""
Example: writing object files and reading them back.

Run from the repository root; the files land in the current working directory.
"""

from objectwriter import ObjectGenerator, ObjectWriter, read_objects
from objectwriter.cli import load_config_file


# =============================================================================
# Example 1: Default run (1-integers.obj, 2-string.obj, 3-date.obj)
# =============================================================================
report = ObjectGenerator(run_id="example-default").run()
print(f"Default run: {report['status']}")
for audit in report["written"]:
    print(f"   {audit['target_location']}: {read_objects(audit['target_location'])}")


# =============================================================================
# Example 2: Plan loaded from YAML with a shared failure scope
# =============================================================================
config = load_config_file("examples/plan_shared_scope.yaml")
report = ObjectGenerator(run_id="example-shared").run(config)
print(f"\nShared-scope run: {report['status']}, skipped={report['skipped']}")


# =============================================================================
# Example 3: Writing directly
# =============================================================================
writer = ObjectWriter()
writer.write_objects("mixed.obj", [1, "two", 3.0, None, b"\x04"])
print(f"\nmixed.obj: {read_objects('mixed.obj')}")
