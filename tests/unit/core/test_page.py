"""Unit tests for core/page.py"""

import pytest

from hdiff.config import Settings
from hdiff.core.assemble import assemble_report
from hdiff.core.models import Report
from hdiff.core.page import build_page, build_summary, build_table


@pytest.fixture(name="report")
def report_fixture(file1, renderer, colors):
    file2 = ["line 1", "line 2", "line 3", "line 5"]
    return assemble_report(file1, file2, ["4d3", "< line 4"], renderer, colors)


def test_table_rows_have_two_cells():
    report = Report(old_blocks=["a", "b"], new_blocks=["x"])
    table = build_table(report, "old.txt", "new.txt")
    assert table.count("<TR>") == 2
    assert '<TD VALIGN="top"><PRE>b</PRE></TD>\n<TD VALIGN="top">&nbsp;</TD>' in table
    assert "<TH>Original Code<BR>old.txt</TH><TH>New Code<BR>new.txt</TH>" in table


def test_blank_placeholder_is_a_pre_cell(report):
    table = build_table(report, "a", "b")
    assert '<TD VALIGN="top"><PRE> </PRE></TD>' in table


def test_summary_table(report):
    summary = build_summary(report)
    assert "<TD>delete</TD><TD>&nbsp;</TD><TD>1</TD><TD>&nbsp;</TD><TD>1</TD>" in summary
    assert '<TR class="greyback"><TD>Total</TD>' in summary


def test_page_layout(report):
    settings = Settings(font_size="12px")
    page = build_page(report, settings, "a.txt", "b.txt", info1="owner: me", host="box", today="Mon")
    assert page.startswith("<!DOCTYPE HTML")
    assert "<TITLE>Difference between a.txt and b.txt</TITLE>" in page
    assert "font-size: 12px;" in page
    assert "<span>owner: me</span>" in page
    assert "Mon on box<BR>" in page
    assert page.index("Color Legend") < page.index("Original Code") < page.index("Number of affected lines")
    assert "truncation limit" not in page
    assert "<textarea" not in page
    assert page.endswith("</HTML>\n")


def test_page_legend_uses_configured_colors(report):
    page = build_page(report, Settings(delete_color="123456"), "a", "b")
    assert '<TD style="background-color:#123456;">Delete Record</TD>' in page


def test_page_truncation_note(report):
    page = build_page(report, Settings(truncate=40), "a", "b")
    assert "truncation limit of 40 characters" in page


def test_page_shows_script(report):
    settings = Settings(show_script=True, script_width=80, script_height=5)
    page = build_page(report, settings, "a", "b", script=["4d3", "< line\t4"])
    assert '<textarea rows="5" cols="80"' in page
    assert "4d3\n&lt; line  4\n</textarea>" in page


def test_page_escapes_file_names(report):
    page = build_page(report, Settings(), "<a>.txt", "b")
    assert "&lt;a&gt;.txt" in page
