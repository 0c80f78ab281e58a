"""
Text and HTML bodies for the demo pages.
"""

from __future__ import annotations

from datetime import datetime

_HOME_PAGE_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>Blog API</title>
    <style>
      body {
        font-family: system-ui, sans-serif;
        line-height: 1.6;
        max-width: 800px;
        margin: 0 auto;
        padding: 20px;
      }
      pre {
        background-color: #f4f4f4;
        padding: 12px;
        border-radius: 4px;
        overflow-x: auto;
      }
      code {
        font-family: monospace;
      }
      h1, h2 {
        color: #2563eb;
      }
    </style>
  </head>
  <body>
    <h1>Blog API</h1>
    <p>Welcome to the Blog API! Here are the available endpoints:</p>

    <h2>Endpoints</h2>
    <ul>
      <li><code>GET /api/posts</code> - List all posts</li>
      <li><code>GET /api/posts/:id</code> - Get a specific post</li>
      <li><code>POST /api/posts</code> - Create a new post</li>
      <li><code>PUT /api/posts/:id</code> - Update a post</li>
      <li><code>DELETE /api/posts/:id</code> - Delete a post</li>
    </ul>

    <h2>Example</h2>
    <pre><code>
// Example: Fetch all posts
fetch('/api/posts')
  .then(response => response.json())
  .then(data => console.log(data));
    </code></pre>

    <div id="app">
      <h2>Posts</h2>
      <div id="posts-list">Loading...</div>
    </div>

    <script>
      fetch('/api/posts')
        .then(response => response.json())
        .then(data => {
          const postsEl = document.getElementById('posts-list');
          postsEl.innerHTML = '';

          data.posts.forEach(post => {
            const postEl = document.createElement('div');
            postEl.innerHTML = `
              <h3>${post.title}</h3>
              <p>${post.content.substring(0, 100)}...</p>
              <p><small>By ${post.author} on ${new Date(post.createdAt).toLocaleDateString()}</small></p>
              <hr>
            `;
            postsEl.appendChild(postEl);
          });
        })
        .catch(err => {
          document.getElementById('posts-list').innerHTML =
            `<p>Error loading posts: ${err.message}</p>`;
        });
    </script>
  </body>
</html>
"""


def home_page_html() -> str:
    """
    Endpoint overview plus a script that lists posts from `/api/posts`.
    """
    return _HOME_PAGE_HTML


def welcome_text() -> str:
    return "Welcome to my Deno Deploy API!"


def server_time_text(now: datetime) -> str:
    # Same shape as a US-locale toLocaleString(): 5/1/2025, 2:30:00 PM
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return (
        "Current server time: "
        f"{now.month}/{now.day}/{now.year}, {hour}:{now.minute:02d}:{now.second:02d} {meridiem}"
    )


def data_payload(*, timestamp: str, environment: str) -> dict:
    return {
        "message": "This is JSON data from Deno Deploy",
        "timestamp": timestamp,
        "environment": environment,
    }
