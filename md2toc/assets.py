"""Static stylesheet and script written next to every generated page."""

STYLESHEET_NAME = "styles.css"
SCRIPT_NAME = "script.js"

CSS = """body {
    font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
    line-height: 1.6;
    color: #333;
    margin: 0;
    padding: 0;
    display: flex;
    min-height: 100vh;
}

.toc {
    width: 250px;
    background-color: #f5f5f5;
    padding: 20px;
    border-right: 1px solid #ddd;
    position: fixed;
    height: 100vh;
    overflow-y: auto;
    box-sizing: border-box;
}

.toc h2 {
    margin-top: 0;
    font-size: 1.2em;
    color: #444;
}

.toc ul {
    list-style: none;
    padding-left: 15px;
    margin: 0;
}

.toc li {
    margin: 5px 0;
    position: relative;
}

.toc a {
    color: #0366d6;
    text-decoration: none;
    display: block;
    padding: 2px 0;
    transition: all 0.2s ease;
}

.toc a:hover {
    text-decoration: underline;
}

.toc a.active {
    font-weight: bold;
    color: #d03636;
    border-left: 3px solid #d03636;
    padding-left: 8px;
    margin-left: -11px;
    background-color: #f9f9f9;
}

.content {
    flex: 1;
    margin-left: 290px;
    padding: 20px;
    max-width: 800px;
}

h1, h2, h3, h4, h5, h6 {
    color: #222;
    margin-top: 1.5em;
    margin-bottom: 0.5em;
    font-weight: 600;
    scroll-margin-top: 20px;
}

h1 { font-size: 2em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h2 { font-size: 1.5em; border-bottom: 1px solid #eaecef; padding-bottom: 0.3em; }
h3 { font-size: 1.25em; }
h4 { font-size: 1em; }
h5 { font-size: 0.875em; }
h6 { font-size: 0.85em; color: #6a737d; }

pre {
    background-color: #f6f8fa;
    border-radius: 3px;
    padding: 16px;
    overflow: auto;
}

code {
    font-family: SFMono-Regular, Consolas, "Liberation Mono", Menlo, monospace;
    background-color: rgba(27,31,35,0.05);
    border-radius: 3px;
    padding: 0.2em 0.4em;
    font-size: 85%;
}

pre code {
    background-color: transparent;
    padding: 0;
}

table {
    border-collapse: collapse;
    width: 100%;
    margin: 1em 0;
}

th, td {
    border: 1px solid #ddd;
    padding: 8px;
    text-align: left;
}

th {
    background-color: #f2f2f2;
    font-weight: bold;
}

tr:nth-child(even) {
    background-color: #f9f9f9;
}

a {
    color: #0366d6;
    text-decoration: none;
}

a:hover {
    text-decoration: underline;
}

hr {
    border: 0;
    height: 1px;
    background-color: #ddd;
    margin: 1.5em 0;
}

@media (max-width: 768px) {
    body {
        flex-direction: column;
    }

    .toc {
        width: 100%;
        height: auto;
        position: relative;
        border-right: none;
        border-bottom: 1px solid #ddd;
    }

    .content {
        margin-left: 0;
        padding: 20px;
    }
}
"""

JS = """document.addEventListener('DOMContentLoaded', function() {
    // Highlight the TOC link of the heading currently in view
    const observer = new IntersectionObserver(function(entries) {
        entries.forEach(function(entry) {
            if (!entry.isIntersecting) {
                return;
            }
            const id = entry.target.getAttribute('id');
            const tocLink = document.querySelector(`.toc a[href="#${id}"]`);

            document.querySelectorAll('.toc a').forEach(function(link) {
                link.classList.remove('active');
            });

            if (tocLink) {
                tocLink.classList.add('active');

                // Keep the active link visible inside the TOC panel
                const toc = document.querySelector('.toc');
                const linkRect = tocLink.getBoundingClientRect();
                const tocRect = toc.getBoundingClientRect();

                if (linkRect.top < tocRect.top) {
                    toc.scrollTo({
                        top: toc.scrollTop + linkRect.top - tocRect.top - 20,
                        behavior: 'smooth'
                    });
                } else if (linkRect.bottom > tocRect.bottom) {
                    toc.scrollTo({
                        top: toc.scrollTop + linkRect.bottom - tocRect.bottom + 20,
                        behavior: 'smooth'
                    });
                }
            }
        });
    }, {
        root: null,
        rootMargin: '0px',
        threshold: 0.5
    });

    document.querySelectorAll('h1, h2, h3, h4, h5, h6').forEach(function(header) {
        observer.observe(header);
    });

    // Smooth scroll from TOC links, then update the URL
    document.querySelectorAll('.toc a').forEach(function(link) {
        link.addEventListener('click', function(e) {
            e.preventDefault();
            const targetId = this.getAttribute('href');
            const targetElement = document.querySelector(targetId);

            if (targetElement) {
                targetElement.scrollIntoView({
                    behavior: 'smooth',
                    block: 'start'
                });
                history.pushState(null, null, targetId);
            }
        });
    });
});
"""
