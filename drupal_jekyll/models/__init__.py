from .drupal_post import DrupalPost

__all__ = ["DrupalPost"]
