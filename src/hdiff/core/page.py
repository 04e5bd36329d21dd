"""HTML page assembly: document header, legend, two-column table and summary"""

import html
from typing import Optional, Sequence

from hdiff.config import Settings, highlight_colors
from hdiff.core.models import OpKind, Report


DOCTYPE = (
    '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN"\n'
    '"http://www.w3.org/TR/html4/strict.dtd">\n'
)

STYLE = """\
thead {
	display:table-header-group;
}
tbody {
	display:table-row-group;
}
.aquamarineback { background-color: #0fffff; }
.greyback { background-color: #c0c0c0; font-weight: bold; }
.titleinfo { font-weight: bold; font-style: italic; font-size: 16px; }
.underline { text-decoration: underline; }
.largetext { font-size: 150%; font-weight: bold; }
a.info
{
position:relative;
z-index:24;
background-color:#ccc;
color:blue;
text-decoration:underline;
}
a.info:hover
{
z-index:25;
background-color:#ff0
}
a.info span
{
display: none
}
a.info:hover span
{
display:block;
position:absolute;
top:2em; left:1em; width:26em;
border:1px solid #5C3317;
background-color:#AF886C;
color:#000;
text-align: left;
text-decoration:none;
font-size: 75%;
}
"""

LEGEND_ORDER = (
    (OpKind.delete, "Delete Record"),
    (OpKind.change, "Change Record"),
    (OpKind.add,    "Add Record"),
)


def build_head(name1: str, name2: str, settings: Settings) -> str:
    return (
        f"{DOCTYPE}<HTML>\n<HEAD>\n"
        '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">\n'
        f"<TITLE>Difference between {name1} and {name2}</TITLE>\n"
        '<style type="text/css" media="print,screen" >\n'
        f"{STYLE}"
        f"body {{ font-family: {settings.font_family}; font-size: {settings.font_size}; }}\n"
        "</style>\n</HEAD>\n<BODY>\n"
    )


def build_title(name1: str, name2: str, info1: str, info2: str) -> str:
    """Header table naming both files; hovering a name shows its metadata."""
    rows = []
    for caption, name, info in (("Difference between", name1, info1), ("and", name2, info2)):
        rows.append(
            f'<TR>\n<TD><span class="largetext">{caption}</span></TD>\n'
            f'<TD><span class="largetext"><A HREF="javascript:void()" class="info">'
            f"{name}<span>{info}</span></A></span></TD>\n</TR>\n"
        )
    return '<TABLE border="0" cellpadding="5" cellspacing="0">\n' + "".join(rows) + "</TABLE>\n"


def build_script_window(script: Sequence[str], settings: Settings) -> str:
    """Raw diff output in a read-only text area."""
    body = "".join(html.escape(line.expandtabs(settings.tab_width), quote=False) + "\n" for line in script)
    return (
        f'<textarea rows="{settings.script_height}" cols="{settings.script_width}" '
        f'style="border: green double 5px;">\n{body}</textarea>\n<BR>\n'
    )


def build_legend(settings: Settings) -> str:
    colors = highlight_colors(settings)
    rows = "".join(
        f'<TR><TD style="background-color:{colors[kind]};">{text}</TD></TR>\n'
        for kind, text in LEGEND_ORDER
    )
    return (
        "<BR>Color Legend:<BR>\n"
        '<TABLE border="0" CELLSPACING="2" CELLPADDING="2">\n'
        f"{rows}</TABLE><BR>\n"
    )


def _cell(block: Optional[str]) -> str:
    if block is None:
        return '<TD VALIGN="top">&nbsp;</TD>\n'
    return f'<TD VALIGN="top"><PRE>{block}</PRE></TD>\n'


def build_table(report: Report, name1: str, name2: str) -> str:
    """Two-column table; one row per paired block, padding cells left empty."""
    rows = "".join(f"<TR>{_cell(old)}{_cell(new)}</TR>\n" for old, new in report.rows())
    return (
        '<TABLE border="1" CELLSPACING="0" CELLPADDING="2">\n'
        '<THEAD><TR class="aquamarineback">'
        f"<TH>Original Code<BR>{name1}</TH><TH>New Code<BR>{name2}</TH></TR></THEAD>\n"
        f"<TBODY>\n{rows}</TBODY>\n</TABLE>\n"
    )


def build_summary(report: Report) -> str:
    gap = "<TD>&nbsp;</TD>"
    rows = "".join(
        f"<TR><TD>{kind.label}</TD>{gap}<TD>{count}</TD>{gap}<TD>{lines}</TD></TR>\n"
        for kind, count, lines in report.summary.items()
    )
    return (
        '<BR><TABLE border="0" CELLSPACING="0" CELLPADDING="2">\n'
        '<TR><TH class="underline">Operation</TH><TH WIDTH="20">&nbsp;</TH>'
        '<TH class="underline">Count</TH><TH WIDTH="20">&nbsp;</TH>'
        '<TH class="underline">Number of affected lines</TH></TR>\n'
        f"{rows}"
        f'<TR class="greyback"><TD>Total</TD>{gap}<TD>{report.summary.total_count}</TD>'
        f"{gap}<TD>{report.summary.total_lines}</TD></TR>\n"
        "</TABLE>\n"
    )


def build_page(
    report: Report,
    settings: Settings,
    file1: str,
    file2: str,
    info1: str = "",
    info2: str = "",
    script: Optional[Sequence[str]] = None,
    host: str = "",
    today: str = "",
    ) -> str:
    """Wrap the assembled report in a complete HTML document."""
    name1, name2 = html.escape(file1), html.escape(file2)
    parts = [
        build_head(name1, name2, settings),
        build_title(name1, name2, info1, info2),
        f"{today} on {host}<BR><BR>\n",
    ]
    if settings.show_script and script is not None:
        parts.append(build_script_window(script, settings))
    parts.append(build_legend(settings))
    if settings.truncate is not None:
        parts.append(
            f"Note : This report was generated with a truncation limit of "
            f"{settings.truncate} characters<BR><BR>\n"
        )
    parts.append(build_table(report, name1, name2))
    parts.append(build_summary(report))
    parts.append("</BODY>\n</HTML>\n")
    return "".join(parts)
