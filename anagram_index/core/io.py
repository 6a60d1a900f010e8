"""Reading word files and reading/writing exported anagram indexes."""

from typing import Iterable, List, Set, Tuple

import structlog

from ..errors import ExportFormatError, IndexReadError, IndexWriteError

logger = structlog.get_logger(__name__)

KEY_SEPARATOR = ":"
WORD_SEPARATOR = "|"


def read_words(path: str, encoding: str = "utf-8") -> List[str]:
    """
    Read a line-delimited word file.
    
    Line terminators are removed but words are otherwise returned as written;
    trimming happens when the words are indexed.
    
    Args:
        path: Path of the word file
        encoding: Text encoding of the file
        
    Returns:
        One entry per line
        
    Raises:
        IndexReadError: If the file cannot be opened or decoded
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            words = [line.rstrip("\r\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        logger.error("word_file_read_failed", path=str(path), error=str(e))
        raise IndexReadError(str(path), str(e)) from e
    
    logger.debug("word_file_read", path=str(path), total_lines=len(words))
    return words


def write_lines(path: str, lines: Iterable[str], encoding: str = "utf-8") -> int:
    """
    Write formatted lines to a file, one per line.
    
    Args:
        path: Destination path
        lines: Lines without terminators
        encoding: Text encoding of the file
        
    Returns:
        Number of lines written
        
    Raises:
        IndexWriteError: If the destination cannot be opened or written
    """
    count = 0
    try:
        with open(path, "w", encoding=encoding, newline="\n") as f:
            for line in lines:
                f.write(line)
                f.write("\n")
                count += 1
    except (OSError, UnicodeEncodeError) as e:
        logger.error("export_write_failed", path=str(path), error=str(e))
        raise IndexWriteError(str(path), str(e)) from e
    
    logger.debug("export_written", path=str(path), total_lines=count)
    return count


def format_record(key: str, words: Iterable[str]) -> str:
    """Format one anagram group as key:word1|word2|..."""
    return key + KEY_SEPARATOR + WORD_SEPARATOR.join(words)


def parse_record(line: str) -> Tuple[str, Set[str]]:
    """
    Parse one exported record.
    
    The line is split on the first ':' and the remainder on '|'. Words that
    themselves contain either separator cannot be recovered.
    
    Args:
        line: A record without its line terminator
        
    Returns:
        Canonical key and the set of words
        
    Raises:
        ExportFormatError: If the line has no key separator
    """
    key, separator, rest = line.partition(KEY_SEPARATOR)
    if not separator:
        raise ExportFormatError(line)
    return key, set(rest.split(WORD_SEPARATOR))


def read_export(path: str, encoding: str = "utf-8") -> List[Tuple[str, Set[str]]]:
    """
    Read every record of an exported index. Blank lines are skipped.
    
    Raises:
        IndexReadError: If the file cannot be opened or decoded
        ExportFormatError: If a line is not a valid record
    """
    records = []
    for line_number, line in enumerate(read_words(path, encoding), start=1):
        if not line:
            continue
        try:
            records.append(parse_record(line))
        except ExportFormatError as e:
            logger.error("export_record_invalid", path=str(path), line_number=line_number)
            raise ExportFormatError(line, line_number) from e
    return records
