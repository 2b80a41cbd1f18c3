#!/usr/bin/env python3
"""
Basic query example
Finds elements, text and siblings in an inline document, and optionally
in a remote page given on the command line
"""

import sys

from owl import LogManager, OwlError, html_parse_from_string

DOCUMENT = """
<html>
  <body>
    <ul class="links">
      <li>To a <a href="hello.jsp">JSP page</a> right?</li>
      <li>To a <a href="hello">servlet</a></li>
    </ul>
    <div class="first second">Multiple classes</div>
    <div class="first">Single class</div>
  </body>
</html>
"""


def main():
    LogManager(log_level="INFO")
    root = html_parse_from_string(DOCUMENT)

    li = root.find('ul', 'class', 'links').find('li')
    print(f"text:      {li.text()!r}")
    print(f"full text: {li.full_text()!r}")
    print(f"next li:   {li.find_next_element_sibling().full_text()!r}")

    print("loose class='first':")
    root.find_all('div', 'class', 'first').for_each(lambda i, r: print(f"  {i}: {r.text()}"))
    print(f"strict class='first': {root.find_strict('div', 'class', 'first').text()!r}")

    missing = root.find('footer').find('p')
    print(f"chained error: {missing.error.kind.name} - {missing.error}")

    if len(sys.argv) > 1:
        try:
            page = root.visit(sys.argv[1])
        except OwlError as e:
            print(f"❌ {e.kind.name}: {e}")
            sys.exit(1)
        print(f"remote title: {page.title().text()!r}")


if __name__ == "__main__":
    main()
