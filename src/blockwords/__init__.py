# topmark:header:start
#
#   project      : BlockWords
#   file         : __init__.py
#   file_relpath : src/blockwords/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BlockWords package.

BlockWords is a configurable pattern-matching diagnostic engine for markup. It
consumes parse events (tag starts, tag ends, text nodes) and reports every
substring that matches a user-configured list of blocked patterns, classified by
where the match occurred.

Most users only need the host entry point:

```python
from blockwords.engine import lint_text

log = lint_text('<div class="bad-name"></div>', {"block-words": {"all": ["bad-name"]}})
for diag in log:
    print(diag.render())
```
"""

from __future__ import annotations
