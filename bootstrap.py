#!/usr/bin/env python3
"""
Setup script for Lexicon Trie.
Creates dictionary.txt: one lowercase word per line, sorted.
"""

import os
import sys
import urllib.request

SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def normalize_word_list(lines):
    """Lowercase, keep purely alphabetic words, dedupe and sort."""
    words = set()
    for line in lines:
        word = line.strip().lower()
        if word and word.isalpha():
            words.add(word)
    return sorted(words)


def write_word_list(words, dict_path):
    with open(dict_path, 'w', encoding='utf-8') as f:
        for word in words:
            f.write(word + '\n')


def download_dictionary(dict_path, system_dict=SYSTEM_DICT, urls=URLS):
    """Build *dict_path* from the system word list or a public download.

    Returns True if a dictionary is available afterwards.
    """
    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    if os.path.exists(system_dict):
        print(f"  Using system dictionary: {system_dict}")
        with open(system_dict, encoding='utf-8', errors='ignore') as f:
            words = normalize_word_list(f)
        write_word_list(words, dict_path)
        print(f"✓ Dictionary created: {len(words):,} words → {dict_path}")
        return True

    print("Downloading word list...")
    for url in urls:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url, timeout=30) as resp:
                text = resp.read().decode('utf-8', errors='ignore')
        except OSError as e:
            print(f"  Failed: {e}")
            continue
        words = normalize_word_list(text.splitlines())
        write_word_list(words, dict_path)
        print(f"✓ Dictionary downloaded: {len(words):,} words")
        return True

    print("\n⚠ Could not download a word list automatically.")
    print("  Save any one-word-per-line list as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  Lexicon Trie — Setup")
    print("=" * 50)
    print()

    dict_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dictionary.txt')
    ok = download_dictionary(dict_path)

    print()
    print("=" * 50)
    print("  Run the shell:")
    print()
    print("    python lexicon_trie.py")
    print("    python lexicon_trie.py --dict words.txt")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
