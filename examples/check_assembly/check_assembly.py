"""Example: report assembly includes that match no declared dependency."""

import pathlib
import sys

from asminclude import DescriptorChecker, load_manifest

HERE = pathlib.Path(__file__).resolve().parent


def check(descriptor: str, manifest: str) -> list:
    """Return the IncludeProblems found in ``descriptor``."""
    dependencies = load_manifest(manifest)
    return DescriptorChecker().check_file(descriptor, dependencies)


def main(argv: list) -> int:
    descriptor = argv[1] if len(argv) > 1 else str(HERE / "assembly.xml")
    manifest = argv[2] if len(argv) > 2 else str(HERE / "dependencies.yaml")
    problems = check(descriptor, manifest)
    for problem in problems:
        print(f"dependencySet[{problem.set_index}] {problem.pattern}: {problem.message}")
    return 1 if problems else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
