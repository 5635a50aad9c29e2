"""Pay event extraction from fixed-width pay stub text reports.

Submodules:
  patterns      -- marker phrases, column layout table, compiled regexes
  classifiers   -- line classification helpers
  schema        -- Time / Event / EventTable Pydantic models
  fields        -- never-raising per-column converters
  segmentation  -- table boundary detection
  parser        -- table and event-row parsing
  formatting    -- CSV rendering
  pipeline      -- parse_stub(), run() and convert_file() entry points
  config        -- environment-driven settings
  cli           -- command line interface
"""

from payinfo.pipeline import convert_file, parse_stub, run
from payinfo.schema import Event, EventTable, Time

__all__ = ["Event", "EventTable", "Time", "convert_file", "parse_stub", "run"]
