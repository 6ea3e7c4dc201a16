"""
Corpus loading helpers.

Files are joined with a single space rather than a newline: the tokenizer
drops newlines in place, which would glue the last word of one file onto the
first word of the next.
"""

import os
import logging

import pandas as pd

logger = logging.getLogger(__name__)

CSV_SUFFIXES = (".csv",)


def read_text_corpus(path, encoding="utf-8"):
    """Read a plain-text corpus file."""
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def read_csv_corpus(path, header=None, column=0):
    """
    Read one column of a CSV file into a single string.

    Args:
        path (str): Path to the CSV file
        header (int or None): Row number holding column names, or None
        column (int or str): Column position, or column name when `header`
            is set

    Returns:
        str: Column values joined by single spaces; missing cells are skipped
    """
    try:
        df = pd.read_csv(path, encoding="UTF-8", header=header)
        series = df[column] if isinstance(column, str) else df.iloc[:, column]
        return " ".join(series.dropna().astype(str))
    except Exception as e:
        logger.error(f"Error processing CSV file at {path}: {e}", extra={
            "metrics": {"path": path, "column": column}
        })
        raise


def load_corpus(paths, csv_header=None, csv_column=0):
    """
    Load and concatenate several corpus files.

    `.csv` files go through `read_csv_corpus`; everything else is read as text.

    Raises:
        ValueError: No paths were given.
    """
    if not paths:
        raise ValueError("No corpus file paths provided.")

    texts = []
    for path in paths:
        if os.path.splitext(path)[1].lower() in CSV_SUFFIXES:
            texts.append(read_csv_corpus(path, header=csv_header, column=csv_column))
        else:
            texts.append(read_text_corpus(path))

    corpus = " ".join(texts)
    logger.info("Corpus loaded", extra={
        "metrics": {"files": len(paths), "chars": len(corpus)}
    })
    return corpus
