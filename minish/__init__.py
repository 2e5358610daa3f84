"""Parts of a small POSIX-style shell: lexer, expansion, environment, builtins, paths and here-documents."""

__version__ = "0.1.0"