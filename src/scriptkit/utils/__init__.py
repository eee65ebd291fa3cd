"""
Utils — коллекции, строки, файлы, время, цвета, отладка.
"""

from scriptkit.utils.colors import (
    color_grayscale,
    color_invert,
    color_lerp,
    color_luminance,
    color_to_hex,
    hex_to_color,
    hsv_to_rgb,
    random_color,
    rgb_to_hsv,
)
from scriptkit.utils.containers import (
    array_average,
    array_chunk,
    array_count,
    array_difference,
    array_flatten,
    array_group_by,
    array_intersect,
    array_pick_random,
    array_rotate,
    array_shuffle,
    array_sum,
    array_union,
    array_unique,
    dict_filter,
    dict_get_path,
    dict_invert,
    dict_merge,
    dict_sort_by_value,
)
from scriptkit.utils.debug import Stopwatch, debug_dump, measure_call
from scriptkit.utils.files import (
    decrypt_file,
    encrypt_file,
    file_exists,
    read_json,
    read_text,
    write_json,
    write_text,
)
from scriptkit.utils.strings import (
    capitalize_first,
    count_words,
    is_palindrome,
    pad_left,
    pad_right,
    random_string,
    reverse_string,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    truncate,
)
from scriptkit.utils.timefmt import (
    days_in_month,
    format_duration,
    is_leap_year,
    seconds_to_hms,
    timestamp,
)

__all__ = [
    # Colors
    "color_grayscale",
    "color_invert",
    "color_lerp",
    "color_luminance",
    "color_to_hex",
    "hex_to_color",
    "hsv_to_rgb",
    "random_color",
    "rgb_to_hsv",
    # Containers
    "array_average",
    "array_chunk",
    "array_count",
    "array_difference",
    "array_flatten",
    "array_group_by",
    "array_intersect",
    "array_pick_random",
    "array_rotate",
    "array_shuffle",
    "array_sum",
    "array_union",
    "array_unique",
    "dict_filter",
    "dict_get_path",
    "dict_invert",
    "dict_merge",
    "dict_sort_by_value",
    # Debug
    "Stopwatch",
    "debug_dump",
    "measure_call",
    # Files
    "decrypt_file",
    "encrypt_file",
    "file_exists",
    "read_json",
    "read_text",
    "write_json",
    "write_text",
    # Strings
    "capitalize_first",
    "count_words",
    "is_palindrome",
    "pad_left",
    "pad_right",
    "random_string",
    "reverse_string",
    "slugify",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "truncate",
    # Time
    "days_in_month",
    "format_duration",
    "is_leap_year",
    "seconds_to_hms",
    "timestamp",
]
