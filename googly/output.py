"""결과 출력 포맷 (cli / json / xml)"""
import json
import xml.etree.ElementTree as ET
from typing import Sequence

from googly.engine.result import Result

OUTPUT_FORMATS = ("cli", "json", "xml")


def format_cli(results: Sequence[Result]) -> str:
    blocks = []
    for i, result in enumerate(results, start=1):
        blocks.append(f"[ {i} ]  {result.title}\n{result.description}\n{result.link}\n")
    return "\n".join(blocks)


def format_json(results: Sequence[Result]) -> str:
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


def format_xml(results: Sequence[Result]) -> str:
    root = ET.Element("Results")
    for result in results:
        item = ET.SubElement(root, "Result")
        for name, value in result.to_dict().items():
            ET.SubElement(item, name).text = value
    ET.indent(root, space="  ")
    return ET.tostring(root, encoding="unicode")


_FORMATTERS = {
    "cli": format_cli,
    "json": format_json,
    "xml": format_xml,
}


def format_results(results: Sequence[Result], output_format: str = "cli") -> str:
    try:
        formatter = _FORMATTERS[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return formatter(results)
