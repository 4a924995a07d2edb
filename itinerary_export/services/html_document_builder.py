"""HTML document builder for standalone, shareable itinerary exports."""

from itinerary_export.configs.settings import MISSING_DESTINATION_ERROR, settings
from itinerary_export.errors import MalformedInputError
from itinerary_export.schemas.itinerary import Activity, DayItinerary, ItineraryResponse
from itinerary_export.utils.helpers import escape_text, format_created_at

LOCATION_MARKER = "\N{ROUND PUSHPIN}"
FOOTER_MARKER = "\N{AIRPLANE}\N{VARIATION SELECTOR-16}"


class ItineraryDocumentBuilder:
    """
    Builder for self-contained HTML itinerary documents.

    Every fragment is built by its own method and returned as a string, so a
    single activity or day can be rendered and checked on its own. All styling
    is embedded in the document head; the output references no external
    resources and can be opened offline as a single file.

    Every user-supplied value goes through ``escape_text`` where it is
    inserted, and nowhere else.
    """

    # ==========================================================================
    # Document Styles - Reusable CSS Constants
    # ==========================================================================
    DOCUMENT_STYLES: dict[str, str] = {
        # Brand Colors
        "color_primary": "#3B82F6",
        "color_text_primary": "#333",
        "color_text_secondary": "#666",
        "color_bg_activity": "#F8FAFC",
        "color_border": "#E5E7EB",
        # Typography
        "font_stack": "Arial, sans-serif",
        "font_size_destination": "36px",
        "font_size_details": "16px",
        "font_size_day_header": "20px",
        "font_size_activity_name": "18px",
        "line_height_description": "1.5",
        # Spacing
        "margin_body": "40px",
        "margin_section": "40px",
        "margin_day": "30px 0",
        "margin_activity": "15px 0",
        "padding_header_bottom": "20px",
        "padding_day_header": "15px",
        "padding_activity": "15px",
        # Layout
        "border_radius_day_header": "8px",
        "border_header": "3px solid #3B82F6",
        "border_activity": "4px solid #3B82F6",
        "gradient_day_header": "linear-gradient(135deg, #3B82F6, #10B981)",
    }

    def __init__(
        self,
        brand_name: str | None = None,
        date_format: str | None = None,
    ) -> None:
        self.brand_name = brand_name or settings.BRAND_NAME
        self.date_format = date_format or settings.DATE_FORMAT

    def _get_base_template(self) -> str:
        """
        Get the base document template with CSS styles.

        Returns:
            str: The base HTML template with placeholders.
        """
        return """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{ font-family: {font_stack}; margin: {margin_body}; color: {color_text_primary}; }}
        .header {{
            text-align: center;
            margin-bottom: {margin_section};
            border-bottom: {border_header};
            padding-bottom: {padding_header_bottom};
        }}
        .destination {{
            font-size: {font_size_destination};
            font-weight: bold;
            color: {color_primary};
            margin-bottom: 10px;
        }}
        .details {{ color: {color_text_secondary}; font-size: {font_size_details}; }}
        .day {{ margin: {margin_day}; page-break-inside: avoid; }}
        .day-header {{
            background: {gradient_day_header};
            color: white;
            padding: {padding_day_header};
            border-radius: {border_radius_day_header};
            font-size: {font_size_day_header};
            font-weight: bold;
        }}
        .activity {{
            margin: {margin_activity};
            padding: {padding_activity};
            border-left: {border_activity};
            background: {color_bg_activity};
        }}
        .time {{ font-weight: bold; color: {color_primary}; }}
        .activity-name {{ font-size: {font_size_activity_name}; font-weight: bold; margin: 5px 0; }}
        .description {{ color: {color_text_secondary}; line-height: {line_height_description}; }}
        .footer {{
            margin-top: {margin_section};
            text-align: center;
            color: {color_text_secondary};
            border-top: 1px solid {color_border};
            padding-top: 20px;
        }}
        @media print {{
            body {{ margin: 20px; }}
        }}
    </style>
</head>
<body>
{body_content}
</body>
</html>
"""

    def build_template(
        self,
        title: str,
        header_html: str,
        content_html: str,
        footer_html: str,
    ) -> str:
        """
        Build the complete document with the provided components.

        Args:
            title: Plain-text document title for the HTML head.
            header_html: The header section HTML.
            content_html: The day blocks HTML.
            footer_html: The footer section HTML.

        Returns:
            str: The complete HTML document.
        """
        body_content = "\n".join(part for part in (header_html, content_html, footer_html) if part)

        return self._get_base_template().format(
            title=escape_text(title),
            body_content=body_content,
            **self.DOCUMENT_STYLES,
        )

    def build_header(self, itinerary: ItineraryResponse) -> str:
        """
        Build the header with destination and trip summary.

        Raises:
            MalformedInputError: If ``createdAt`` cannot be parsed.
        """
        generated_on = format_created_at(itinerary.created_at, self.date_format)
        summary = f"{itinerary.number_of_days} Day Travel Itinerary | Generated on {generated_on}"
        return f"""<div class="header">
    <div class="destination">{escape_text(itinerary.destination)}</div>
    <div class="details">{escape_text(summary)}</div>
</div>"""

    def build_activity(self, activity: Activity) -> str:
        """
        Build one activity block.

        The location line is only emitted when a non-blank location is present.

        Args:
            activity: The activity to render.

        Returns:
            str: The activity block HTML.
        """
        lines = [
            '    <div class="activity">',
            f'        <div class="time">{escape_text(activity.time)}</div>',
            f'        <div class="activity-name">{escape_text(activity.activity)}</div>',
            f'        <div class="description">{escape_text(activity.description)}</div>',
        ]
        if activity.location and activity.location.strip():
            lines.append(
                f'        <div class="location">{LOCATION_MARKER} {escape_text(activity.location)}</div>',
            )
        lines.append("    </div>")
        return "\n".join(lines)

    def build_day(self, day: DayItinerary, destination: str) -> str:
        """
        Build one day block holding its activities in the supplied order.

        Args:
            day: The day to render.
            destination: The trip destination used in the day heading.

        Returns:
            str: The day block HTML.
        """
        heading = f"Day {day.day}: {destination} Adventure"
        parts = [
            '<div class="day">',
            f'    <div class="day-header">{escape_text(heading)}</div>',
            *(self.build_activity(activity) for activity in day.activities),
            "</div>",
        ]
        return "\n".join(parts)

    def build_footer(self, destination: str) -> str:
        """Build the closing footer."""
        farewell = f"Have an amazing trip to {destination}!"
        return f"""<div class="footer">
    <p>{escape_text(farewell)} {FOOTER_MARKER}</p>
    <p>Generated by {escape_text(self.brand_name)}</p>
</div>"""

    def build_document(self, itinerary: ItineraryResponse) -> str:
        """
        Build the complete itinerary document.

        Days are rendered in the order supplied, never sorted, and
        ``numberOfDays`` is only shown in the summary line.

        Args:
            itinerary: The trip plan to render.

        Returns:
            str: The complete, self-contained HTML document.

        Raises:
            MalformedInputError: If the destination is blank or ``createdAt``
                cannot be parsed.
        """
        destination = itinerary.destination
        if not destination or not destination.strip():
            raise MalformedInputError(MISSING_DESTINATION_ERROR, field="destination")

        header_html = self.build_header(itinerary)
        content_html = "\n".join(self.build_day(day, destination) for day in itinerary.itinerary)
        footer_html = self.build_footer(destination)

        return self.build_template(
            title=f"{destination} Itinerary",
            header_html=header_html,
            content_html=content_html,
            footer_html=footer_html,
        )


def render_itinerary(itinerary: ItineraryResponse) -> str:
    """Render an itinerary with the default builder settings."""
    return ItineraryDocumentBuilder().build_document(itinerary)
