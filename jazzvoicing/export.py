import os

import music21


def rows_to_score(rows, title="Voicings"):
    """
    Build a music21 Score from voiced rows: one Part per row, one whole-note
    chord per voiced chord with the chord symbol as its lyric.

    Note tokens are passed to music21 as written, so 'E2' stays E2.
    """
    score = music21.stream.Score()
    score.insert(0, music21.metadata.Metadata(title=title))
    for i, row in enumerate(rows):
        part = music21.stream.Part()
        part.partName = f"Line {i + 1}"
        for voiced in row:
            c = music21.chord.Chord(voiced.notes)
            c.duration.quarterLength = 4.0
            c.addLyric(voiced.chord)
            part.append(c)
        score.insert(0, part)
    return score


def write_musicxml(rows, output_path, title="Voicings"):
    """Write rows as MusicXML. Returns the written path."""
    out_dir = os.path.dirname(output_path)
    if out_dir and not os.path.exists(out_dir):
        os.makedirs(out_dir)
    score = rows_to_score(rows, title=title)
    return score.write("musicxml", fp=output_path)
