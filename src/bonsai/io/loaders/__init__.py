from .config_loader import load_config
from .tree_store import load_tree_record, save_tree_record

__all__ = ["load_config", "load_tree_record", "save_tree_record"]
