"""Maps a structured summary onto Notion content blocks."""

from .models import DocumentBlock, StructuredSummary

PARAGRAPH_DELIMITER = "\n\n"
TRANSCRIPTION_HEADING = "Transcription"
SUMMARY_HEADING = "Summary"


class DocumentFormatter:
    """Builds the fixed page layout from a structured summary."""

    def format(self, summary: StructuredSummary) -> list[DocumentBlock]:
        """
        Builds the ordered block sequence for a transcription page.

        Layout: Transcription heading, one paragraph per logical paragraph,
        Summary heading, one paragraph with the summary text.

        Args:
            summary: The parsed summarization output.

        Returns:
            Blocks in the order they are appended to the page.
        """
        blocks = [DocumentBlock.heading(TRANSCRIPTION_HEADING)]
        blocks.extend(
            DocumentBlock.paragraph(segment)
            for segment in self.split_paragraphs(summary.logical_paragraphs)
        )
        blocks.append(DocumentBlock.heading(SUMMARY_HEADING))
        blocks.append(DocumentBlock.paragraph(summary.summary))
        return blocks

    @staticmethod
    def split_paragraphs(text: str) -> list[str]:
        """Splits on blank lines, keeping empty segments."""
        return text.split(PARAGRAPH_DELIMITER)
