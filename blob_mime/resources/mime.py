"""Mime resources: per-extension summaries and the override listing."""

from blob_mime.services.state import get_dependencies


def _flag(value: bool | None) -> str:
    return "inferred" if value is None else str(value).lower()


async def extension_resource(extension: str) -> str:
    """Describe how an extension is labelled and served.

    Args:
        extension: File extension, with or without a leading dot

    Returns:
        Plain-text summary of the classification
    """
    deps = get_dependencies()
    classification = deps.classifier.classify(extension)
    record = deps.classifier.lookup_mime_type_for(extension)

    lines = [
        f"Extension:     {extension}",
        f"Mime type:     {deps.resolver.mime_for(extension)}",
        f"Content-Type:  {classification.content_type}",
        f"Binary:        {str(classification.binary).lower()}",
        f"Disposition:   {classification.disposition}",
    ]
    if record is None:
        lines.append("Registry:      (unknown extension, using defaults)")
    else:
        lines.append(f"Registry:      {record.canonical_type}")
        lines.append(f"Encoding:      {record.encoding_hint or '-'}")
        lines.append(f"Binary flag:   {_flag(record.binary_override)}")
        lines.append(f"Attach flag:   {_flag(record.attachment_override)}")
    return "\n".join(lines)


async def list_overrides_resource() -> str:
    """List the configured mime overrides and content-type substitutions.

    Returns:
        Formatted listing of both override tables
    """
    deps = get_dependencies()
    lines = ["Mime Overrides", "=" * 40, ""]

    if not deps.overrides:
        lines.append("(none)")
    for override in deps.overrides:
        lines.append(override.type_key)
        if override.extensions:
            lines.append(f"    extensions: {', '.join(override.extensions)}")
        if override.binary is not None:
            lines.append(f"    binary:     {str(override.binary).lower()}")
        if override.attachment is not None:
            lines.append(f"    attachment: {str(override.attachment).lower()}")

    lines.extend(["", "Content-Type Substitutions", "=" * 40, ""])
    if not deps.content_types:
        lines.append("(none)")
    for key, value in sorted(deps.content_types.items()):
        lines.append(f"  {key:<30} -> {value}")

    return "\n".join(lines)
