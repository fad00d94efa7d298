from pathlib import Path

DEFAULT_TEMPLATE = "default"

TEMPLATES: tuple[str, ...] = (DEFAULT_TEMPLATE,)

COLORS: tuple[str, ...] = (
    "red",
    "orange",
    "amber",
    "yellow",
    "lime",
    "green",
    "emerald",
    "teal",
    "cyan",
    "sky",
    "blue",
    "indigo",
    "violet",
    "purple",
    "fuchsia",
    "pink",
    "rose",
    "slate",
    "gray",
    "zinc",
    "stone",
)


def list_resumes(input_dir: str | Path) -> list[str]:
    """List JSON resume file names in the input directory, sorted."""
    directory = Path(input_dir)
    if not directory.is_dir():
        return []
    return sorted(
        p.name for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".json"
    )
