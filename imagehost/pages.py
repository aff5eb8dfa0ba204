from html import escape

UPLOAD_FORM = """\
<h1>Image Hosting Upload</h1>
<form method="POST" enctype="multipart/form-data" action="/upload">
  <input type="file" name="image" accept="image/*" required />
  <button type="submit">Upload Image</button>
</form>
"""


def upload_succeeded(image_url: str) -> str:
    url = escape(image_url)

    return (
        "<h2>Upload successful!</h2>\n"
        f'<p>Image URL: <a href="{url}" target="_blank">{url}</a></p>\n'
        f'<img src="{url}" style="max-width:400px;" />\n'
        '<p><a href="/">Upload another image</a></p>\n'
    )


def upload_failed(message: str) -> str:
    return f'<p>{escape(message)}</p><a href="/">Try again</a>\n'
