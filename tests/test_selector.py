from bathscrape.selector import SoupSelector


HTML = """
<table>
  <tr>
    <td class="tribe-events-othermonth"><div>31</div></td>
    <td class="tribe-events-thismonth">
      <div>1</div>
      <div class="event"><div class="inner">nested</div></div>
    </td>
  </tr>
</table>
"""


def test_select_text_preserves_document_order():
    doc = SoupSelector.from_html("<p>a</p><p> b</p><p>c</p>")
    assert doc.select_text("p") == ["a", " b", "c"]


def test_missing_query_returns_empty_list():
    doc = SoupSelector.from_html(HTML)
    assert doc.select("td.missing") == []
    assert doc.select_text("span") == []
    assert doc.count("span") == 0


def test_child_queries_only_match_direct_children():
    doc = SoupSelector.from_html(HTML)
    [cell] = doc.select("td.tribe-events-thismonth")
    assert cell.count("> div") == 2
    assert cell.count("div") == 3
