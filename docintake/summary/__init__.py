from docintake.summary.base import BaseSummarizer
from docintake.summary.factory import SummarizerFactory
from docintake.summary.models import AIReport
from docintake.summary.summarizer import Summarizer

__all__ = ["AIReport", "BaseSummarizer", "Summarizer", "SummarizerFactory"]
