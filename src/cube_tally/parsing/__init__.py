from .records import iter_draws, parse_header, parse_record, parse_tokens, tokenize

__all__ = ["iter_draws", "parse_header", "parse_record", "parse_tokens", "tokenize"]
