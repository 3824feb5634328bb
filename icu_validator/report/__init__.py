from icu_validator.report.printer import (
    print_directory_validation,
    print_file_validation,
    print_object_validation,
    print_string_validation,
    print_validation,
)

__all__ = [
    "print_directory_validation",
    "print_file_validation",
    "print_object_validation",
    "print_string_validation",
    "print_validation",
]
