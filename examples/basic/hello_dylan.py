"""Tokenize a Dylan file in 3 lines — zero config, zero deps."""

from dylex import tokenize

for token in tokenize("Module: hello\n\ndefine constant $answer = #x2A;"):
    print(token)
