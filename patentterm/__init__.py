"""
patentterm
==========

Estimate when a U.S. utility, plant or design patent expires and when its
maintenance fees fall due.

Import structure
----------------
`import patentterm` is cheap: models, dates, rules and the engine use
only the standard library; :pymod:`patentterm.maintenance` reads its window
width from *pydantic-settings*.  The HTTP layer (:pymod:`api.main`) pulls in FastAPI
and is never imported from here.

Sub‑modules
~~~~~~~~~~~
- :pymod:`patentterm.models`       – ``TermInput`` / ``TermResult`` dataclasses + :class:`~patentterm.models.PatentType`
- :pymod:`patentterm.dates`        – year/month offsets, day counts, display format
- :pymod:`patentterm.rules`        – rule variants and their transforms
- :pymod:`patentterm.engine`       – ``compute_term`` and ``MissingRequiredField``
- :pymod:`patentterm.maintenance`  – fee payment windows
- :pymod:`patentterm.cli`          – ``python -m patentterm.cli``

Quick start
-----------
>>> from datetime import date
>>> from patentterm.engine import compute_term
>>> from patentterm.models import TermInput
>>> res = compute_term(TermInput("utility", "2020-01-01", "2022-01-01"), date(2025, 1, 1))
>>> res.expiration_date, res.term_basis
(datetime.date(2040, 1, 1), '20 years from filing date')

"""

__all__ = [
    "models",
    "dates",
    "rules",
    "engine",
    "maintenance",
]

__version__ = "0.1.0"
