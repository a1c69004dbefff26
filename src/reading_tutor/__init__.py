"""Reading Tutor: passage-based comprehension exercises with typo-tolerant answer checking."""
