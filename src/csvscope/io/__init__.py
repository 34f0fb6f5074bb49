"""Line tokenizing, streaming file access and schema persistence."""

from csvscope.io.reader import LineReader, iter_data_lines
from csvscope.io.schema import read_schema, schema_path_for, write_schema
from csvscope.io.tokenizer import count_delimited_fields, split_plain, tokenize_line

__all__ = [
    "tokenize_line",
    "count_delimited_fields",
    "split_plain",
    "LineReader",
    "iter_data_lines",
    "schema_path_for",
    "write_schema",
    "read_schema",
]
