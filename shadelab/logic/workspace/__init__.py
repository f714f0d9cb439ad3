from .edits import ChannelEdit, CommitHexInput, HexInput, PickColor, SelectShade
from .engine import WorkspaceState, initial_state, reduce
from .state import ColorWorkspace
