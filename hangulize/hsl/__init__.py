"""Lexer, parser and section structures for the HSL spec configuration format."""