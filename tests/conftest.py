"""
Shared documents for the owl test suite
"""

import pytest

from owl import html_parse_from_string

TEST_HTML = """
<html>
  <head>
    <title>Sample "Hello, World" Application</title>
  </head>
  <body bgcolor=white>

    <table border="0" cellpadding="10">
      <tr>
        <td>
          <img src="images/springsource.png">
        </td>
        <td>
          <h1>Sample "Hello, World" Application</h1>
        </td>
      </tr>
    </table>
    <div id="0">
      <div id="1">Just two divs peacing out</div>
    </div>
    check
    <div id="2">One more</div>
    <p>This is the home page for the HelloWorld Web application. </p>
    <p>To prove that they work, you can execute either of the following links:
    <ul>
      <li>To a <a href="hello.jsp">JSP page</a> right?</li>
      <li>To a <a href="hello">servlet</a></li>
    </ul>
    </p>
    <div id="3">
      <div id="4">Last one</div>
    </div>
    <div id="5">
        <h1><span></span></h1>
    </div>
  </body>
</html>
"""

CLASSES_HTML = """
<html>
	<head>
		<title>Sample Application</title>
	</head>
	<body>
		<div class="first second">Multiple classes</div>
		<div class="first">Single class</div>
		<div class="second first third">Multiple classes inorder</div>
		<div>
			<div class="first">Inner single class</div>
			<div class="first second">Inner multiple classes</div>
			<div class="second first">Inner multiple classes inorder</div>
			<div class="third first">Inner multiple classes inorder</div>
		</div>
	</body>
</html>
"""

LIST_HTML = '<ul><li id="a">one</li><!-- note --><li id="b">two</li>tail<li id="c">three</li></ul>'


@pytest.fixture
def root():
    return html_parse_from_string(TEST_HTML)


@pytest.fixture
def classes_root():
    return html_parse_from_string(CLASSES_HTML)


@pytest.fixture
def list_root():
    return html_parse_from_string(LIST_HTML).find('ul')
