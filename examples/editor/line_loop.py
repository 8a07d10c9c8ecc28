"""Drive the analyzer the way an editor does: one line at a time."""

from dylex import Analyzer, LineStream, state_to_json

lines = [
    "Module: editor-demo",
    "",
    "define method greet (name :: <string>)",
    '  format-out("Hello, %s!\\n", name); /* multi',
    "  line comment */",
    "end;",
]

analyzer = Analyzer()
state = analyzer.start_state()
for lineno, line in enumerate(lines, start=1):
    if not line:
        analyzer.blank_line(state)
        continue
    stream = LineStream(line)
    spans = []
    while not stream.eol():
        stream.start = stream.pos
        category = analyzer.token(stream, state)
        if category is not None:
            spans.append(f"{category}:{stream.current()!r}")
    print(lineno, " ".join(spans))
    print("   state:", state_to_json(state))
