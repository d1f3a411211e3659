"""Report records, reporting sinks, Parquet schema and output paths."""
