"""Relex only what changed — resume from the saved state of the edited line."""

from dylex import lex_document, relex

original = 'Module: demo\n\ndefine constant $x = 1;\n/* notes */\nformat-out("done");'
doc = lex_document(original)

# User edits line 3: "$x = 1" → "$x = 2"
new_source = original.replace("$x = 1", "$x = 2")
new_doc = relex(doc, new_source, first_changed_line=3)

print("Lines:", len(new_doc.lines))
print("Line 4 reused (same object?):", doc.lines[3] is new_doc.lines[3])
print("Line 3 relexed:", doc.lines[2] is not new_doc.lines[2])
