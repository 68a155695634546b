"""Lex a Berd function and print its token dump."""

from berd import format_tokens, lex

tokens = lex('fun greet(String name) => { print("hello", name) } !')
print(format_tokens(tokens), end="")
