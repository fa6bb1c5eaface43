#!/usr/bin/env python3
"""Simple script to verify config.example.yaml structure without loading the app."""

import yaml
from pathlib import Path


def verify_config_structure():
    """Verify config.example.yaml has the expected structure."""
    config_file = Path("config.example.yaml")

    if not config_file.exists():
        print("✗ config.example.yaml not found")
        return False

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print(f"✗ Failed to parse config.example.yaml: {e}")
        return False

    if not isinstance(config, dict):
        print("✗ config.example.yaml must contain a mapping")
        return False

    errors = []

    # Every section is optional, but present sections must be mappings
    for key in ['matching', 'catalog', 'validation', 'logging']:
        if key in config and not isinstance(config[key], dict):
            errors.append(f"'{key}' must be a dictionary")

    matching = config.get('matching') if isinstance(config.get('matching'), dict) else {}

    vocabulary = matching.get('vocabulary', [])
    if not isinstance(vocabulary, list):
        errors.append("'matching.vocabulary' must be a list")
    elif 'vocabulary' in matching and not any(
        isinstance(term, str) and term.strip() for term in vocabulary
    ):
        errors.append("'matching.vocabulary' is empty")

    predicate = matching.get('predicate', 'substring')
    if predicate not in ['substring', 'exact']:
        errors.append(f"'matching.predicate' has invalid value: {predicate}")

    aliases = matching.get('category_aliases', {})
    if not isinstance(aliases, dict):
        errors.append("'matching.category_aliases' must be a dictionary")
    else:
        for category, terms in aliases.items():
            if not isinstance(terms, list) or not terms:
                errors.append(f"Category '{category}' must list at least one search term")

    max_recs = matching.get('max_recommendations', 3)
    if not isinstance(max_recs, int) or not 1 <= max_recs <= 20:
        errors.append("'matching.max_recommendations' must be an integer from 1 to 20")

    validation = config.get('validation') if isinstance(config.get('validation'), dict) else {}
    required = validation.get('required_fields', ['technicalStack', 'requirements', 'responsibilities'])
    for field in ['technicalStack', 'requirements', 'responsibilities']:
        if field not in required:
            errors.append(f"'validation.required_fields' must include {field}")

    if errors:
        print("✗ config.example.yaml validation failed:")
        for error in errors:
            print(f"  - {error}")
        return False
    else:
        print("✓ config.example.yaml structure is valid")
        print(f"  - {len(vocabulary)} vocabulary terms")
        print(f"  - Predicate: {predicate}")
        print(f"  - {len(aliases)} category aliases")
        print(f"  - Catalog: {config.get('catalog', {}).get('data_dir', 'not set')}")
        return True


if __name__ == "__main__":
    import sys
    success = verify_config_structure()
    sys.exit(0 if success else 1)
