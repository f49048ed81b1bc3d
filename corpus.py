# read text corpora from files or web pages and feed them to a chain

import logging
import re

import bs4
import requests

from shaney import INITIAL, shift

log = logging.getLogger(__name__)

TIMEOUT = 30
PARAGRAPH = '\n\n'
URL = re.compile(r'https?://', re.IGNORECASE)


def load(url):
    r = requests.get(url, timeout=TIMEOUT)
    r.raise_for_status()
    return bs4.BeautifulSoup(r.content, 'lxml')


def extract(soup):
    for tag in soup.find_all(('script', 'style', 'noscript')):
        tag.decompose()
    for p in soup.find_all('p'):
        # collapse inner blank lines so one <p> stays one paragraph
        text = ' '.join(p.get_text(' ').split())
        if text:
            yield text


def read(source):
    """Return the raw text of a file path or an http(s) URL."""
    if URL.match(source):
        log.info('fetching %s', source)
        return PARAGRAPH.join(extract(load(source)))
    log.info('reading %s', source)
    with open(source, encoding='utf-8', errors='replace') as s:
        return s.read()


def paragraphs(text):
    return text.split(PARAGRAPH)


def words(paragraph):
    return paragraph.split()


def feed_paragraph(chain, paragraph):
    prefix = INITIAL
    n = 0
    for word in words(paragraph):
        chain.add(prefix, word)
        prefix = shift(prefix, word)
        n += 1
    return n


def feed(chain, text):
    npar = nwords = 0
    for p in paragraphs(text):
        n = feed_paragraph(chain, p)
        if n:
            npar += 1
            nwords += n
    return npar, nwords


def ingest(chain, sources):
    for source in sources:
        npar, nwords = feed(chain, read(source))
        log.debug('%s: %d paragraphs, %d words', source, npar, nwords)
