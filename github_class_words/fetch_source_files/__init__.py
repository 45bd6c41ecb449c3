from .fetch_source_files import fetch_source_files, iter_source_files, parse_directory_listing

__all__ = ["fetch_source_files", "iter_source_files", "parse_directory_listing"]
