"""Reading SevenLang source: `lexer` produces tokens, `parser` lowers them to expressions."""
