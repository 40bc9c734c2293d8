"""Table extraction from WordprocessingML (word/document.xml) markup.

Submodules:
  patterns     -- compiled regex patterns, namespace and element-name constants
  markup       -- recovering lxml parse and nesting-aware element lookups
  schema       -- Style / Cell / Row / Table Pydantic models
  config       -- extraction options and header-heuristic thresholds
  classifiers  -- header-row heuristic
  decoding     -- run style, cell and row decoding
  assembly     -- table assembly, row-to-record projection, extract_tables() entry point
  aggregates   -- cell counts, merge detection, text flattening, summary stats
"""
