import pytest
import requests

from ajou_notice_feed import crawler


BASE_URL = "http://media.ajou.ac.kr/media/board/notice.do"

BOARD_HTML = """
<html>
<body>
<table class="board-table">
  <thead>
    <tr><th>번호</th><th>분류</th><th>제목</th><th>작성자</th><th>마감일</th></tr>
  </thead>
  <tbody>
    <tr>
      <td class="b-num-box"><span class="b-notice">공지</span></td>
      <td>학사</td>
      <td class="b-td-left b-no-right">
        <div class="b-title-box">
          <a href="?mode=view&amp;articleNo=900&amp;article.offset=0&amp;articleLimit=30">
            수강신청 <b>안내</b>
          </a>
        </div>
      </td>
      <td>학과사무실</td>
      <td>2024.12.31</td>
    </tr>
    <tr>
      <td class="b-num-box">152</td>
      <td>장학</td>
      <td class="b-td-left b-no-right">
        <div class="b-title-box">
          <a href="?mode=view&amp;articleNo=152">
\t\t\t&lt;2025&gt; 장학금 &amp; 지원 안내
          </a>
        </div>
      </td>
      <td>R&amp;D 센터</td>
      <td>2025.01.15</td>
    </tr>
    <tr>
      <td class="b-num-box">151</td>
      <td>일반</td>
      <td class="b-td-left b-no-right">
        <div class="b-title-box">
          <a href="?mode=view&amp;articleNo=151">세미나 공지</a>
        </div>
      </td>
      <td>미디어학과</td>
      <td>2025.01.10</td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""

EMPTY_BOARD_HTML = """
<table class="board-table"><tbody></tbody></table>
"""


class DummyResponse:
    def __init__(
        self,
        text: str,
        status_code: int = 200,
        encoding: str = "utf-8",
        apparent_encoding: str = "utf-8",
    ):
        self.text = text
        self.status_code = status_code
        self.encoding = encoding
        self.apparent_encoding = apparent_encoding

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


@pytest.fixture
def fake_board(monkeypatch):
    """Serve board HTML instead of hitting the network; records each request.

    ``pages`` may carry ``status_code``/``encoding`` overrides and receives the
    last ``response`` served.
    """
    calls = []
    pages = {"html": BOARD_HTML}

    def fake_get(url, params, headers, timeout, verify):
        calls.append(
            {
                "url": url,
                "params": params,
                "headers": headers,
                "timeout": timeout,
                "verify": verify,
            }
        )
        response = DummyResponse(
            pages["html"],
            status_code=pages.get("status_code", 200),
            encoding=pages.get("encoding", "utf-8"),
        )
        pages["response"] = response
        return response

    monkeypatch.setattr(crawler.requests, "get", fake_get)
    return pages, calls
