#!/usr/bin/env python3
"""
Utility functions for the gist uploader.
"""

import wcwidth
from typing import Optional, Union


BLUE = "\033[94m"
END = "\033[0m"


def format_time(seconds: float) -> str:
    """
    Format seconds into a human-readable time string.

    Args:
        seconds: Number of seconds

    Returns:
        Human-readable time string
    """
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string with appropriate unit (B, KB, MB, GB)
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def format_kb(size_bytes: Union[int, float]) -> str:
    """Whole kilobytes, e.g. '50KB'."""
    return f"{size_bytes / 1024:.0f}KB"


def get_visual_width(text) -> int:
    """
    Calculate the visual width of text, considering emojis and other wide characters.

    Args:
        text: The string to calculate visual width for

    Returns:
        int: The visual width of the text
    """
    return wcwidth.wcswidth(str(text))


def pad_string(text, width, align="left") -> str:
    """
    Pad a string to the given visual width, taking into account wide characters like emojis.

    Args:
        text: The string to pad
        width: The desired visual width
        align: Alignment ('left', 'right', 'center')

    Returns:
        str: The padded string
    """
    text_str = str(text)
    visual_width = get_visual_width(text_str)
    padding_needed = max(0, width - visual_width)

    if align == "right":
        return " " * padding_needed + text_str
    elif align == "center":
        left_padding = padding_needed // 2
        right_padding = padding_needed - left_padding
        return " " * left_padding + text_str + " " * right_padding
    else:  # left align
        return text_str + " " * padding_needed


def truncate_to_width(text, max_width: int) -> str:
    """
    Truncate text to a visual width, ending with '...' when shortened.

    Args:
        text: The string to truncate
        max_width: Maximum visual width including the ellipsis

    Returns:
        str: The original or truncated string
    """
    text_str = str(text)
    if get_visual_width(text_str) <= max_width:
        return text_str

    truncated = ""
    for char in text_str:
        if get_visual_width(truncated + char + "...") <= max_width:
            truncated += char
        else:
            break
    return truncated + "..."


def print_dynamic_table(data, headers, max_path_length: Optional[int] = None) -> None:
    """
    Print a dynamically sized table based on content length.
    Handles wide characters like emojis correctly for proper alignment.

    Args:
        data: List of dictionaries containing the data to print
        headers: Dictionary mapping column keys to header names
        max_path_length: Maximum width for the path column (None for no limit)
    """
    display_data = [dict(row) for row in data]

    if max_path_length is not None and "path" in headers:
        for row in display_data:
            if "path" in row:
                row["path"] = truncate_to_width(row["path"], max_path_length)

    col_widths = {col: get_visual_width(header) + 2 for col, header in headers.items()}

    for row in display_data:
        for col in headers.keys():
            value = str(row.get(col, ""))
            col_widths[col] = max(col_widths[col], get_visual_width(value) + 2)

    total_width = sum(col_widths.values()) + len(headers) - 1

    print(f"\n{'=' * total_width}")

    header_cells = []
    for col in headers.keys():
        header_cells.append(pad_string(headers[col], col_widths[col]))
    print(" ".join(header_cells))

    print(f"{'-' * total_width}")

    for row in display_data:
        row_cells = []
        for col in headers.keys():
            value = str(row.get(col, ""))
            row_cells.append(pad_string(value, col_widths[col]))
        print(" ".join(row_cells))

    print(f"{'=' * total_width}\n")


def print_file_count_summary(
    succeeded: int,
    failed: int,
    operation: str = "processed",
    elapsed: Optional[float] = None,
) -> None:
    """
    Print a standardized summary of file operation results.

    Args:
        succeeded: Number of files successfully processed
        failed: Number of files that failed
        operation: Description of the operation performed
        elapsed: Optional duration of the operation in seconds
    """
    total = succeeded + failed
    duration = f" in {format_time(elapsed)}" if elapsed is not None else ""
    print(
        f"\nOperation completed: {succeeded}/{total} files {operation} successfully{duration}"
    )
    if failed > 0:
        print(f"  - {failed} files failed")
