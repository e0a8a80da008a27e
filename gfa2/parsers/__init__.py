# Initialize parsers module
from .gfa1_parser import GFA1Parser
from .gfa2_parser import GFA2Parser
from .loader import load_gfa

__all__ = ['GFA1Parser', 'GFA2Parser', 'load_gfa']
