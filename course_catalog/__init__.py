"""
Course Catalog Package
======================

An in-memory course catalog: load comma-delimited course records from a text
file, check that every prerequisite refers to a defined course, look courses
up by number and list them in sorted order.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO printing)              │
│                                                                         │
│  ┌───────────────┐  ┌──────────────────┐  ┌──────────────────────────┐  │
│  │ CatalogLoader │  │ CatalogValidator │  │      CatalogQuery        │  │
│  │  (file I/O)   │  │ (prerequisites)  │  │ (lookup, sorted listing) │  │
│  └───────────────┘  └──────────────────┘  └──────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│   TerminalDisplay: prints menus, listings and course details (stdout)   │
│   logging: errors and load summaries (stderr)                           │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│              CatalogShell (dispatch) + cli.run (menu loop)              │
│        ShellState in, ShellState out, one menu choice at a time         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

course_catalog/
├── __init__.py          # This file - main exports
├── __main__.py          # python -m course_catalog
├── config.py            # Constants and environment overrides
├── errors.py            # CatalogError hierarchy
├── shell.py             # CatalogShell command dispatch
├── cli.py               # Interactive menu loop, logging setup
│
├── models/              # Data classes and enums
│   ├── course.py        # Course, Catalog
│   ├── results.py       # LoadReport, ValidationResult, LookupResult
│   └── shell.py         # MenuChoice, ShellState, parse_choice
│
├── data/
│   ├── loader.py        # CatalogLoader
│   └── sample_courses.txt  # Bundled example catalog
│
├── engines/
│   ├── validation.py    # CatalogValidator
│   └── query.py         # CatalogQuery
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Programmatic use:

    from course_catalog import CatalogLoader, CatalogValidator, CatalogQuery
    from course_catalog.config import SAMPLE_CATALOG_PATH

    catalog = CatalogLoader().load_catalog(SAMPLE_CATALOG_PATH)
    result = CatalogValidator().validate(catalog)
    courses = CatalogQuery().list_all(catalog)

Running from command line:

    python -m course_catalog

"""

# Version
__version__ = "1.0.0"

# Main exports
from .shell import CatalogShell
from .cli import main

# Model exports
from .models import (
    Catalog,
    Course,
    LoadReport,
    LookupResult,
    MenuChoice,
    ShellState,
    ValidationResult,
    parse_choice,
)

# Engine exports
from .engines import CatalogQuery, CatalogValidator

# Data exports
from .data import CatalogLoader

# UI exports
from .ui import TerminalDisplay

# Error exports
from .errors import (
    CatalogError,
    CatalogOpenError,
    CourseNotFoundError,
    MalformedLineError,
    MissingPrerequisiteError,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "CatalogShell",
    "main",
    # Models
    "Catalog",
    "Course",
    "LoadReport",
    "LookupResult",
    "MenuChoice",
    "ShellState",
    "ValidationResult",
    "parse_choice",
    # Engines
    "CatalogQuery",
    "CatalogValidator",
    # Data
    "CatalogLoader",
    # UI
    "TerminalDisplay",
    # Errors
    "CatalogError",
    "CatalogOpenError",
    "CourseNotFoundError",
    "MalformedLineError",
    "MissingPrerequisiteError",
]
